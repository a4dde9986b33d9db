EVENT_GUESTS_URL = "/api/guests/event/{event_id}"
EXPORT_GUESTS_URL = "/api/guests/event/{event_id}/export"
PUBLIC_EVENT_URL = "/api/guests/public/event/{event_id}"
SUBMIT_RSVP_URL = "/api/guests/rsvp/{event_id}"
RSVP_STATUS_URL = "/api/guests/rsvp/{event_id}/{name}"
