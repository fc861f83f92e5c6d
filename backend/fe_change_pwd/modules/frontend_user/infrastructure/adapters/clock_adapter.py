"""System clock implementation."""

import time

from fe_change_pwd.modules.frontend_user.domain.interfaces.services.clock import IClock


class SystemClock(IClock):
    """Reads the current unix time from the operating system."""

    def now(self) -> int:
        return int(time.time())
