from .bus import Event, EventBus, Subscription
from .crop_events import CropChangedEvent

__all__ = ["Event", "EventBus", "Subscription", "CropChangedEvent"]
