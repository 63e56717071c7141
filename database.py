"""
Database setup and initialization for the Golf Tour Manager.
"""
import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event as sa_event
from sqlalchemy.engine import Engine

db = SQLAlchemy()


@sa_event.listens_for(Engine, 'connect')
def _configure_sqlite_connection(dbapi_connection, connection_record):
    """Hand transaction control to SQLAlchemy so BEGIN IMMEDIATE can be emitted."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


@sa_event.listens_for(Engine, 'begin')
def _begin_immediate_on_sqlite(conn):
    # Take the write lock up front; concurrent finalizations wait on the busy timeout.
    if conn.dialect.name == 'sqlite':
        conn.exec_driver_sql('BEGIN IMMEDIATE')


def init_db(app):
    """Initialize the database with the Flask app."""
    db.init_app(app)
    with app.app_context():
        # Import all models to register them with SQLAlchemy
        from models import (Player, PlayerSeasonStats, Course, CourseHole, Event,
                            EventParticipant, EventResult, Score, HandicapHistory, AuditLog)
        db.create_all()
