"""
Event and people management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from evensplit.db.session import get_db
from evensplit.models.event import Event
from evensplit.models.person import Person
from evensplit.models.expense import Expense, ExpenseParticipant
from evensplit.schemas.event import (
    EventCreate, EventResponse, EventDetailResponse,
    PersonCreate, PersonResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


def get_event_or_404(event_id: int, db: Session) -> Event:
    """Fetch an event or raise 404."""
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found"
        )
    return event


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    event_data: EventCreate,
    db: Session = Depends(get_db)
):
    """Create a new event."""
    event = Event(name=event_data.name, image_url=event_data.image_url)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info(f"Created event {event.id}")
    return event


@router.get("", response_model=List[EventResponse])
async def list_events(db: Session = Depends(get_db)):
    """List all events."""
    return db.query(Event).order_by(Event.id).all()


@router.get("/{event_id}", response_model=EventDetailResponse)
async def get_event(
    event_id: int,
    db: Session = Depends(get_db)
):
    """Get event details with its people."""
    return get_event_or_404(event_id, db)


@router.delete("/{event_id}")
async def delete_event(
    event_id: int,
    db: Session = Depends(get_db)
):
    """Delete an event together with its people and expenses."""
    event = get_event_or_404(event_id, db)
    db.delete(event)
    db.commit()
    logger.info(f"Deleted event {event_id}")
    return {"message": "Event deleted successfully"}


@router.post("/{event_id}/people", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def add_person(
    event_id: int,
    person_data: PersonCreate,
    db: Session = Depends(get_db)
):
    """Add a person to the event."""
    get_event_or_404(event_id, db)

    existing = db.query(Person).filter(
        Person.event_id == event_id,
        Person.name == person_data.name
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A person with this name is already part of the event"
        )

    person = Person(event_id=event_id, name=person_data.name)
    db.add(person)
    db.commit()
    db.refresh(person)
    return person


@router.delete("/{event_id}/people/{person_id}")
async def remove_person(
    event_id: int,
    person_id: int,
    db: Session = Depends(get_db)
):
    """Remove a person who is not referenced by any expense."""
    get_event_or_404(event_id, db)

    person = db.query(Person).filter(
        Person.id == person_id,
        Person.event_id == event_id
    ).first()
    if not person:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Person not found"
        )

    in_use = db.query(Expense.id).filter(Expense.payer_id == person_id).first() or \
        db.query(ExpenseParticipant.id).filter(ExpenseParticipant.person_id == person_id).first()
    if in_use:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Person still has expenses; delete those first"
        )

    db.delete(person)
    db.commit()
    return {"message": "Person removed successfully"}
