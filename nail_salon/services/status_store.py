from dataclasses import dataclass, field
from typing import Optional, List
from nail_salon.session.contracts import Notification

@dataclass
class StatusStore:
    busy: bool = False              # upload in flight, UI shows the spinner
    last_error: Optional[str] = None
    notification: Optional[Notification] = None
    logs: List[str] = field(default_factory=list)

    def set_busy(self, v: bool):
        self.busy = v

    def notify(self, n: Notification):
        self.notification = n

    def dismiss(self):
        self.notification = None

    def log(self, msg: str):
        self.logs.append(msg)
        if len(self.logs) > 200:
            self.logs = self.logs[-200:]
