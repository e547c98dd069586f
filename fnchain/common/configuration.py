import json
import os

import objectfactory

from fnchain.common.schedulers import THREADING, new_scheduler


@objectfactory.register
class TimingConfig(objectfactory.Serializable):
    """Settings shared by :func:`~fnchain.debounce` and :func:`~fnchain.throttle`.

    ``timespan`` is expressed in milliseconds, ``scheduler`` names the timer
    facility used for deferred calls.
    """
    timespan = objectfactory.Field()
    scheduler = objectfactory.Field()

    def __init__(self, timespan=0, scheduler=THREADING):
        super().__init__()
        self.timespan = timespan
        self.scheduler = scheduler

    @staticmethod
    def load(body: dict):
        config = TimingConfig()
        config.deserialize(body)
        return config

    @staticmethod
    def load_file(file):
        if os.path.exists(file):
            with open(file) as cfg:
                return TimingConfig.load(json.load(cfg))
        else:
            raise RuntimeError("configuration not found!!!")

    def new_scheduler(self):
        return new_scheduler(self.scheduler)
