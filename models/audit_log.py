"""Audit log model for critical state changes."""
from datetime import datetime
from database import db


class AuditLog(db.Model):
    """Immutable audit entries for scoring actions such as event finalization."""

    __tablename__ = 'audit_logs'
    __table_args__ = (
        db.Index('ix_audit_logs_created_at', 'created_at'),
        db.Index('ix_audit_logs_action', 'action'),
        db.Index('ix_audit_logs_entity', 'entity_type', 'entity_id'),
    )

    id = db.Column(db.Integer, primary_key=True)
    action = db.Column(db.String(80), nullable=False)
    entity_type = db.Column(db.String(80), nullable=False)
    entity_id = db.Column(db.Integer, nullable=True)
    ip_address = db.Column(db.String(64), nullable=True)
    user_agent = db.Column(db.String(255), nullable=True)
    details_json = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
