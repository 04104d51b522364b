# planning.py - PROJECTION DU PLANNING CLINIQUE
import logging
from dataclasses import dataclass

import pandas as pd

from . import constantes as cst
from .physique import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleSlot:
    index: int
    start_minute: int
    end_minute: int
    start_label: str
    end_label: str


@dataclass(frozen=True)
class ScheduleProjection:
    slot_minutes: int
    slots_per_day: int
    daily_revenue: float
    schedule: tuple


def format_clock(minute_of_day):
    """Minute de la journée -> horloge 12 h ('8:00 AM', '1:25 PM')."""
    hours, minutes = divmod(int(minute_of_day), 60)
    suffix = "AM" if hours % 24 < 12 else "PM"
    h12 = hours % 12
    if h12 == 0:
        h12 = 12
    return f"{h12}:{minutes:02d} {suffix}"


def project_schedule(scan_time_seconds, sequences_per_exam) -> ScheduleProjection:
    """
    Débit journalier d'une salle.

    Créneau = préparation (10 min) + séquences de l'examen + remise en état (5 min),
    arrondi à la minute. Les créneaux s'enchaînent dès 08:00 ; seul un nombre
    entier de créneaux tient dans la plage 08:00-20:00.
    """
    total_scan_seconds = scan_time_seconds * sequences_per_exam
    slot_seconds = cst.PREP_SECONDS + total_scan_seconds + cst.RESET_SECONDS
    slot_minutes = round_half_up(slot_seconds / 60)

    opening_minute = cst.OPENING_HOUR * 60
    operating_minutes = (cst.CLOSING_HOUR - cst.OPENING_HOUR) * 60

    # Entrée dégénérée : pas de créneau plutôt qu'une division par zéro
    if slot_minutes <= 0:
        logger.debug("Créneau de %s min : planning vide", slot_minutes)
        return ScheduleProjection(slot_minutes=slot_minutes, slots_per_day=0, daily_revenue=0, schedule=())

    slots_per_day = operating_minutes // slot_minutes
    daily_revenue = slots_per_day * cst.REVENUE_PER_SLOT

    schedule = []
    for i in range(slots_per_day):
        start = opening_minute + i * slot_minutes
        end = start + slot_minutes
        schedule.append(ScheduleSlot(i, start, end, format_clock(start), format_clock(end)))

    logger.debug(
        "Planning : %d séquence(s)/examen, créneau %d min, %d créneaux, recette %s",
        sequences_per_exam, slot_minutes, slots_per_day, daily_revenue,
    )
    return ScheduleProjection(
        slot_minutes=slot_minutes,
        slots_per_day=slots_per_day,
        daily_revenue=daily_revenue,
        schedule=tuple(schedule),
    )


def schedule_to_dataframe(projection: ScheduleProjection) -> pd.DataFrame:
    return pd.DataFrame({
        "Créneau": [slot.index + 1 for slot in projection.schedule],
        "Début": [slot.start_label for slot in projection.schedule],
        "Fin": [slot.end_label for slot in projection.schedule],
    })
