# server/storage.py

from fastapi import Depends
from sqlalchemy import select, text
from sqlalchemy.orm import Session

from server.database import get_db
from server.models import LeadershipValue, Submission, User


class Storage:
    """
    CRUD interface over the database session.
    Every route handler and service talks to persistence through this class only.
    """

    def __init__(self, db: Session):
        self.db = db

    def ping(self):
        self.db.execute(text("SELECT 1"))

    # -------------------------------
    # Users
    # -------------------------------

    def get_user(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, username: str, password: str) -> User:
        user = User(username=username, password=password)
        return self._save(user)

    # -------------------------------
    # Leadership values
    # -------------------------------

    def get_all_leadership_values(self) -> list[LeadershipValue]:
        return self.db.query(LeadershipValue).order_by(LeadershipValue.id).all()

    def get_leadership_value_by_id(self, value_id: int) -> LeadershipValue | None:
        return self.db.get(LeadershipValue, value_id)

    def create_leadership_value(self, value: str, description: str) -> LeadershipValue:
        return self._save(LeadershipValue(value=value, description=description))

    def update_leadership_value(self, value_id: int, value: str, description: str) -> LeadershipValue | None:
        item = self.get_leadership_value_by_id(value_id)
        if item is None:
            return None
        item.value = value
        item.description = description
        return self._save(item)

    def delete_leadership_value(self, value_id: int) -> bool:
        item = self.get_leadership_value_by_id(value_id)
        if item is None:
            return False
        self.db.delete(item)
        self.db.commit()
        return True

    # -------------------------------
    # Submissions
    # -------------------------------

    def create_submission(self, name: str, email: str, company_code: str | None, core_values: list[str]) -> Submission:
        submission = Submission(
            name=name,
            email=email,
            company_code=company_code or None,
            core_values=list(core_values),
        )
        return self._save(submission)

    def get_all_submissions(self) -> list[Submission]:
        return self.db.query(Submission).order_by(Submission.created_at.desc(), Submission.id.desc()).all()

    def get_submissions_by_company_code(self, company_code: str) -> list[Submission]:
        return (
            self.db.query(Submission)
            .filter(Submission.company_code == company_code)
            .order_by(Submission.created_at.desc(), Submission.id.desc())
            .all()
        )

    def get_unique_company_codes(self) -> list[str]:
        stmt = (
            select(Submission.company_code)
            .where(Submission.company_code.is_not(None))
            .distinct()
            .order_by(Submission.company_code)
        )
        return [code for code in self.db.scalars(stmt) if code]

    def _save(self, obj):
        self.db.add(obj)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj


def get_storage(db: Session = Depends(get_db)) -> Storage:
    return Storage(db)
