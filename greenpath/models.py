from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone
import uuid

db = SQLAlchemy()

TRANSPORT_MODES = ("DRIVER", "RIDER")
MAX_PASSENGERS = 100


def generate_id():
    # uuid1 is derived from the creation timestamp
    return str(uuid.uuid1())


def utcnow():
    return datetime.now(timezone.utc)


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)


class RideRequest(db.Model):
    __tablename__ = "ride_requests"

    # Insertion order, so search results come back in publication order
    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(36), unique=True, nullable=False, default=generate_id)

    # Opaque client token, not checked against users
    user_id = db.Column(db.String(255), nullable=False, index=True)
    lat = db.Column(db.Float, nullable=False)
    lng = db.Column(db.Float, nullable=False)
    destination = db.Column(db.Text, nullable=True)
    transport_mode = db.Column(db.String(10), nullable=True)  # DRIVER or RIDER
    passengers = db.Column(db.Integer, default=1)
    created_at = db.Column(db.DateTime, default=utcnow)
