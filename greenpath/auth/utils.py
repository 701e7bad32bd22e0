from flask import jsonify
from werkzeug.security import check_password_hash, generate_password_hash
from ..models import User


def normalize_email(email):
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


def hash_password(password):
    return generate_password_hash(password)


def authenticate(email, password):
    """Return the User matching the credentials, or None."""
    email = normalize_email(email)
    if not email or not isinstance(password, str) or not password:
        return None

    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password_hash, password):
        return None
    return user


def create_auth_token(user):
    # The user id doubles as the session token
    return user.id


def generate_auth_response(user):
    response_body = {
        "message": "Login successful",
        "token": create_auth_token(user),
        "name": user.name,
    }
    return jsonify(response_body)
