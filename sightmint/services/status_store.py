import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger("sightmint")

MAX_LOGS = 200


@dataclass
class StatusStore:
    busy: bool = False
    logs: List[str] = field(default_factory=list)

    def set_busy(self, v: bool):
        self.busy = v

    def log(self, msg: str):
        logger.info(msg)
        self.logs.append(msg)
        if len(self.logs) > MAX_LOGS:
            self.logs = self.logs[-MAX_LOGS:]
