from .gateways import HttpFolderGateway, InMemoryFolderGateway
from .sinks import (
    LoggingNavigator,
    LoggingNotificationSink,
    RecordingNavigator,
    RecordingNotificationSink,
)

__all__ = [
    "HttpFolderGateway",
    "InMemoryFolderGateway",
    "LoggingNavigator",
    "LoggingNotificationSink",
    "RecordingNavigator",
    "RecordingNotificationSink",
]
