"""SqlBlueprintPersistence: relational adapter over SQLAlchemy Core.

Two tables back the port:
- ``blueprints(id, author, name)`` with UNIQUE(author, name)
- ``points(id, x, y, point_order, blueprint_id)`` with a cascading FK and
  UNIQUE(blueprint_id, point_order)

Point order is carried by ``point_order`` and every read sorts on it.
Each public method runs in exactly one transaction (``engine.begin()``).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    create_engine,
    delete,
    event,
    func,
    insert,
    select,
)
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from blueprints_backend.errors import (
    BlueprintNotFoundError,
    DuplicateBlueprintError,
    PointOrderConflictError,
)
from blueprints_backend.models import MAX_NAME_LENGTH, Blueprint, Point
from blueprints_backend.persistence.base import BlueprintPersistence


ORDER_CONSTRAINT = "uq_point_blueprint_order"

metadata = MetaData()

blueprints_table = Table(
    "blueprints",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("author", String(MAX_NAME_LENGTH), nullable=False),
    Column("name", String(MAX_NAME_LENGTH), nullable=False),
    UniqueConstraint("author", "name", name="uq_blueprint_author_name"),
    Index("idx_blueprint_author", "author"),
)

points_table = Table(
    "points",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("x", Integer, nullable=False),
    Column("y", Integer, nullable=False),
    Column("point_order", Integer, nullable=False),
    Column(
        "blueprint_id",
        Integer,
        ForeignKey("blueprints.id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("blueprint_id", "point_order", name=ORDER_CONSTRAINT),
)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _is_order_collision(exc: IntegrityError) -> bool:
    # Postgres reports the constraint name, SQLite only the column list
    message = str(exc.orig)
    return ORDER_CONSTRAINT in message or "points.blueprint_id, points.point_order" in message


def make_engine(url: str, *, pool_size: int = 5, echo: bool = False) -> Engine:
    """Create a pooled engine; SQLite connections get FK enforcement."""
    kwargs = {"echo": echo, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # Flask's dev server hands requests to worker threads
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = pool_size
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class SqlBlueprintPersistence(BlueprintPersistence):
    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str, *, pool_size: int = 5, echo: bool = False) -> "SqlBlueprintPersistence":
        return cls(make_engine(url, pool_size=pool_size, echo=echo))

    def create_schema(self) -> None:
        """Create missing tables and indexes. Safe to call repeatedly."""
        metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    # -------- helpers --------

    def _find_id(self, conn: Connection, author: str, name: str, *, for_update: bool = False) -> Optional[int]:
        stmt = select(blueprints_table.c.id).where(
            blueprints_table.c.author == author,
            blueprints_table.c.name == name,
        )
        if for_update:
            stmt = stmt.with_for_update()
        return conn.execute(stmt).scalar_one_or_none()

    def _points_for(self, conn: Connection, blueprint_ids: Sequence[int]) -> Dict[int, List[Point]]:
        """Load points for many blueprints in one query, grouped and ordered."""
        grouped: Dict[int, List[Point]] = defaultdict(list)
        if not blueprint_ids:
            return grouped
        rows = conn.execute(
            select(points_table.c.blueprint_id, points_table.c.x, points_table.c.y)
            .where(points_table.c.blueprint_id.in_(blueprint_ids))
            .order_by(points_table.c.blueprint_id, points_table.c.point_order)
        )
        for row in rows:
            grouped[row.blueprint_id].append(Point(row.x, row.y))
        return grouped

    def _next_order(self, blueprint_id: int):
        """Order key for an appended point, computed by the store inside the insert."""
        return (
            select(func.coalesce(func.max(points_table.c.point_order), -1) + 1)
            .where(points_table.c.blueprint_id == blueprint_id)
            .correlate(None)
            .scalar_subquery()
        )

    def _assemble(self, conn: Connection, rows: Iterable) -> List[Blueprint]:
        rows = list(rows)
        points = self._points_for(conn, [r.id for r in rows])
        return [Blueprint(r.author, r.name, tuple(points.get(r.id, ()))) for r in rows]

    # -------- port operations --------

    def save_blueprint(self, bp: Blueprint) -> None:
        with self.engine.begin() as conn:
            try:
                result = conn.execute(
                    insert(blueprints_table).values(author=bp.author, name=bp.name)
                )
            except IntegrityError as e:
                raise DuplicateBlueprintError(bp.author, bp.name) from e
            blueprint_id = result.inserted_primary_key[0]

            if bp.points:
                conn.execute(
                    insert(points_table),
                    [
                        {"x": p.x, "y": p.y, "point_order": i, "blueprint_id": blueprint_id}
                        for i, p in enumerate(bp.points)
                    ],
                )
        logging.debug("Inserted blueprint %s/%s as id=%s", bp.author, bp.name, blueprint_id)

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        with self.engine.begin() as conn:
            blueprint_id = self._find_id(conn, author, name)
            if blueprint_id is None:
                raise BlueprintNotFoundError.for_blueprint(author, name)
            points = self._points_for(conn, [blueprint_id])
        return Blueprint(author, name, tuple(points.get(blueprint_id, ())))

    def get_blueprints_by_author(self, author: str) -> List[Blueprint]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                select(blueprints_table.c.id, blueprints_table.c.author, blueprints_table.c.name)
                .where(blueprints_table.c.author == author)
                .order_by(blueprints_table.c.id)
            ).all()
            if not rows:
                raise BlueprintNotFoundError.for_author(author)
            return self._assemble(conn, rows)

    def get_all_blueprints(self) -> List[Blueprint]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                select(blueprints_table.c.id, blueprints_table.c.author, blueprints_table.c.name)
                .order_by(blueprints_table.c.id)
            ).all()
            return self._assemble(conn, rows)

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        try:
            with self.engine.begin() as conn:
                blueprint_id = self._find_id(conn, author, name, for_update=True)
                if blueprint_id is None:
                    raise BlueprintNotFoundError.for_blueprint(author, name)

                conn.execute(
                    insert(points_table).values(
                        x=x, y=y, point_order=self._next_order(blueprint_id), blueprint_id=blueprint_id
                    )
                )
        except IntegrityError as e:
            if not _is_order_collision(e):
                raise
            raise PointOrderConflictError(author, name) from e

    def delete_blueprint(self, author: str, name: str) -> None:
        with self.engine.begin() as conn:
            blueprint_id = self._find_id(conn, author, name)
            if blueprint_id is None:
                raise BlueprintNotFoundError.for_blueprint(author, name)
            conn.execute(delete(blueprints_table).where(blueprints_table.c.id == blueprint_id))
