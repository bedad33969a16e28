"""
Analysis History Store

Keeps past topic analyses as raw replies so they can be re-parsed and
re-rendered. Newest first, one entry per topic (case-insensitive),
capped at HistoryLimits.MAX_ITEMS.
"""

import logging
import time
from uuid import uuid4

from sqlalchemy import BigInteger, Column, Integer, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from research_advisor.config import HistoryLimits, get_database_url
from research_advisor.schemas.inspiration import HistoryItem

logger = logging.getLogger(__name__)

Base = declarative_base()


class HistoryRecord(Base):
    __tablename__ = "analysis_history"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    topic = Column(String, nullable=False)
    # Unicode case-folded topic; SQL lower() only folds ASCII
    topic_key = Column(String, nullable=False, index=True)
    analysis = Column(Text, nullable=False)
    timestamp = Column(BigInteger, nullable=False)

    def to_item(self) -> HistoryItem:
        return HistoryItem(
            id=self.id,
            topic=self.topic,
            analysis=self.analysis,
            timestamp=self.timestamp,
        )


def topic_key(topic: str) -> str:
    """Key two topics share when they differ only in case."""
    return topic.casefold()


class HistoryStore:
    """
    SQL-backed history of topic analyses.

    Usage:
        store = HistoryStore("sqlite:///research_advisor.db")
        item = store.add("Quantum error correction", markdown)
        recent = store.list()
    """

    def __init__(self, database_url: str | None = None, max_items: int = HistoryLimits.MAX_ITEMS) -> None:
        database_url = database_url or get_database_url()
        engine_kwargs = {}
        if database_url.endswith(":memory:"):
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs = {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }
        self._engine = create_engine(database_url, **engine_kwargs)
        self._Session = sessionmaker(bind=self._engine)
        self._max_items = max_items
        Base.metadata.create_all(self._engine)

    def add(self, topic: str, analysis: str, timestamp: int | None = None) -> HistoryItem:
        """
        Record an analysis, replacing any earlier one for the same topic.

        Args:
            topic: Topic as entered by the user
            analysis: Raw Markdown reply
            timestamp: Milliseconds since epoch; defaults to now
        """
        record = HistoryRecord(
            id=uuid4().hex,
            topic=topic,
            topic_key=topic_key(topic),
            analysis=analysis,
            timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
        )
        with self._Session.begin() as session:
            session.query(HistoryRecord).filter(
                HistoryRecord.topic_key == record.topic_key
            ).delete(synchronize_session=False)
            session.add(record)
            session.flush()

            stale = (
                session.query(HistoryRecord.seq)
                .order_by(HistoryRecord.timestamp.desc(), HistoryRecord.seq.desc())
                .offset(self._max_items)
                .all()
            )
            if stale:
                logger.info(f"Pruning {len(stale)} history entries over the limit")
                session.query(HistoryRecord).filter(
                    HistoryRecord.seq.in_([row.seq for row in stale])
                ).delete(synchronize_session=False)

            return record.to_item()

    def list(self, limit: int | None = None) -> list[HistoryItem]:
        """History entries, newest first."""
        with self._Session() as session:
            records = (
                session.query(HistoryRecord)
                .order_by(HistoryRecord.timestamp.desc(), HistoryRecord.seq.desc())
                .limit(limit or self._max_items)
                .all()
            )
            return [r.to_item() for r in records]

    def get(self, item_id: str) -> HistoryItem | None:
        with self._Session() as session:
            record = session.query(HistoryRecord).filter(HistoryRecord.id == item_id).first()
            return record.to_item() if record else None

    def clear(self) -> None:
        with self._Session.begin() as session:
            deleted = session.query(HistoryRecord).delete()
        logger.info(f"Cleared {deleted} history entries")
