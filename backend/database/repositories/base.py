from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        """Commit the unit of work; a failed commit leaves the session rolled back."""
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
