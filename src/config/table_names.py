from enum import Enum


class TableNames(str, Enum):
    HOSTS = "hosts"
    EVENTS = "events"
    GUESTS = "guests"
