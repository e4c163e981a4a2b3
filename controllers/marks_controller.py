# controllers/marks_controller.py
"""
Marks (eligibility weight) calculation.

calculate_user_marks() reads the four contributing tables through
fetch_scoring_inputs(), scores them with the pure calculator in
utils/weight_calculator.py and upserts the single marks row for the user.
Reads and the write share one transaction; either every sub-weight is stored
or none is.
"""
import logging
import threading
import weakref
from typing import Any, List, NamedTuple, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db.database import SessionLocal, session_scope
from models.base import row_to_dict
from models.education import Education
from models.experience import Experience
from models.marks import Marks
from models.phd import Phd
from models.publication import Publication
from models.user import User
from utils.errors import NotFound, StorageError, storage_stage
from utils.weight_calculator import WeightBreakdown, calculate_weights

logger = logging.getLogger(__name__)

# entries vanish once no caller holds the lock
_user_locks = weakref.WeakValueDictionary()
_user_locks_guard = threading.Lock()


class ScoringInputs(NamedTuple):
    education: Any
    experience: List[Any]
    publications: List[Any]
    phd: Optional[Any]


def _user_lock(user_id: int) -> threading.Lock:
    with _user_locks_guard:
        lock = _user_locks.get(user_id)
        if lock is None:
            lock = _user_locks[user_id] = threading.Lock()
        return lock


def fetch_scoring_inputs(session, user_id: int) -> ScoringInputs:
    """
    Everything the calculator needs for one user. Education is mandatory;
    the other tables may be empty.
    """
    with storage_stage("Error fetching education data"):
        education = session.query(Education).filter(Education.user_id == user_id).first()
    if education is None:
        raise NotFound("User education data not found")

    with storage_stage("Error fetching experience data"):
        experience = session.query(Experience).filter(Experience.user_id == user_id).all()

    with storage_stage("Error fetching publications data"):
        publications = session.query(Publication).filter(Publication.user_id == user_id).all()

    with storage_stage("Error fetching PhD data"):
        phd = session.query(Phd).filter(Phd.user_id == user_id).first()

    return ScoringInputs(education, experience, publications, phd)


def _existing_marks(session, user_id: int):
    # row lock on engines that support SELECT ... FOR UPDATE; ignored by SQLite
    return (
        session.query(Marks)
        .filter(Marks.user_id == user_id)
        .with_for_update()
        .first()
    )


def _store_weights(session, user_id: int, weights: WeightBreakdown) -> bool:
    """Insert or update the marks row. Returns True when a row was inserted."""
    columns = weights.to_columns()

    with storage_stage("Error checking existing marks"):
        row = _existing_marks(session, user_id)

    if row is None:
        session.add(Marks(user_id=user_id, **columns))
        try:
            session.flush()
            return True
        except IntegrityError:
            # another worker inserted first; fall through and update its row
            session.rollback()
            logger.info("Concurrent marks insert for user %s, updating instead", user_id)
        except SQLAlchemyError as exc:
            raise StorageError("Error inserting marks", detail=str(exc.__cause__ or exc)) from exc

        with storage_stage("Error checking existing marks"):
            row = _existing_marks(session, user_id)

    with storage_stage("Error updating marks"):
        for key, value in columns.items():
            setattr(row, key, value)
        session.flush()
    return False


def _flag_submitted(session, user_id: int):
    with storage_stage("Error updating application status"):
        user = session.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    user.form_submitted = True


def calculate_user_marks(user_id: int, submit: bool = False):
    """
    Recalculate and persist a user's weights.
    Returns (WeightBreakdown, created) where created is True on first insert.
    With submit=True the user is also flagged as submitted, in the same
    transaction as the marks row.
    Raises NotFound when the user (on submit) or the education record is
    missing, StorageError on any database failure.
    """
    with _user_lock(user_id):
        session = SessionLocal()
        try:
            inputs = fetch_scoring_inputs(session, user_id)
            weights = calculate_weights(
                inputs.education, inputs.experience, inputs.publications, inputs.phd
            )
            created = _store_weights(session, user_id, weights)
            # after the upsert: its concurrent-insert fallback rolls the session back
            if submit:
                _flag_submitted(session, user_id)
            with storage_stage("Error saving marks"):
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    logger.info(
        "Marks %s for user %s (total=%s)",
        "inserted" if created else "updated", user_id, weights.total_weight,
    )
    return weights, created


def get_user_marks(user_id: int):
    with session_scope() as session:
        with storage_stage("Error retrieving marks"):
            row = session.query(Marks).filter(Marks.user_id == user_id).first()
        if row is None:
            raise NotFound("Marks not found")
        data = row_to_dict(row, exclude=("calculated_at",))
        data["calculated_at"] = row.calculated_at.isoformat() if row.calculated_at else None
        return data
