from fastapi import APIRouter, Depends

from clinic.api.deps import get_store
from clinic.models.doctor import DoctorSummary
from clinic.services.event_source import DoctorDirectory

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.get("", response_model=list[DoctorSummary])
async def list_doctors(store: DoctorDirectory = Depends(get_store)) -> list[DoctorSummary]:
    """Doctors for the calendar filter control."""
    return await store.list_doctors()
