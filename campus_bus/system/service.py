import logging

from campus_bus.exceptions import InvalidInputError, SystemOfflineError
from campus_bus.storage import Storage
from campus_bus.system.schemas import SYSTEM_STATUS_KEY, SystemStatus

logger = logging.getLogger(__name__)

class SystemStatusService:
    """Online/offline switch gating new bookings"""
    
    def __init__(self, store: Storage):
        self.store = store
    
    def get_status(self) -> SystemStatus:
        """Current gate position; online when never set"""
        setting = self.store.get_setting(SYSTEM_STATUS_KEY)
        if not setting:
            return SystemStatus.ONLINE
        try:
            return SystemStatus(setting.value)
        except ValueError:
            logger.warning("Unknown system status %r stored, treating as online", setting.value)
            return SystemStatus.ONLINE
    
    def set_status(self, value) -> SystemStatus:
        try:
            new_status = SystemStatus(value)
        except ValueError:
            raise InvalidInputError("Invalid status value")
        
        self.store.set_setting(SYSTEM_STATUS_KEY, new_status.value)
        logger.info("System status set to %s", new_status.value)
        return new_status
    
    def is_online(self) -> bool:
        return self.get_status() == SystemStatus.ONLINE
    
    def ensure_online(self) -> None:
        if not self.is_online():
            raise SystemOfflineError()
    
    def initialize(self) -> None:
        """Store the default position unless one is already set"""
        if not self.store.get_setting(SYSTEM_STATUS_KEY):
            self.store.set_setting(SYSTEM_STATUS_KEY, SystemStatus.ONLINE.value)
