from .common import API_VERSION, Backoff, Template
from .eventbus import EventBus, EventBusSpec, JetStreamBus, NATSBus, NativeStrategy, PersistenceStrategy
from .eventsource import EventSource, EventSourceSpec
from .sensor import Sensor, SensorSpec
