from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from clinic.api.deps import get_store
from clinic.models.session import SessionPublic, SessionStatus
from clinic.services.event_source import InMemoryClinicStore, SessionNotFoundError, SqlClinicStore

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=list[SessionPublic])
async def list_sessions(
    doctor_id: int | None = Query(None),
    patient_id: int | None = Query(None),
    on_date: date | None = Query(None, alias="date"),
    status_param: SessionStatus | None = Query(None, alias="status"),
    store: InMemoryClinicStore | SqlClinicStore = Depends(get_store),
) -> list[SessionPublic]:
    return await store.list_sessions(
        doctor_id=doctor_id,
        patient_id=patient_id,
        on_date=on_date,
        status=status_param,
    )


@router.get("/{session_id}", response_model=SessionPublic)
async def get_session_detail(
    session_id: int,
    store: InMemoryClinicStore | SqlClinicStore = Depends(get_store),
) -> SessionPublic:
    try:
        return await store.get_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
