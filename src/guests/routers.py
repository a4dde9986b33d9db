from fastapi import APIRouter

from .features.add_guest.router import router as add_guest_router
from .features.export_guests.router import router as export_guests_router
from .features.get_public_event.router import router as get_public_event_router
from .features.get_rsvp_status.router import router as get_rsvp_status_router
from .features.list_guests.router import router as list_guests_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(export_guests_router)
router.include_router(list_guests_router)
router.include_router(add_guest_router)
router.include_router(get_public_event_router)
router.include_router(submit_rsvp_router)
router.include_router(get_rsvp_status_router)
