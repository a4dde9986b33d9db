EVENTS_URL = "/api/events"
EVENT_URL = "/api/events/{event_id}"
