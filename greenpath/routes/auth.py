from flask import Blueprint, current_app, request, jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from ..auth.utils import authenticate, generate_auth_response, hash_password, normalize_email
from ..models import db, User

auth_bp = Blueprint('auth', __name__)


def _text(value):
    return value.strip() if isinstance(value, str) else ""


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = request.get_json(silent=True) or {}

    email = normalize_email(data.get('email'))
    name = _text(data.get('name'))
    password = data.get('password')
    if not isinstance(password, str):
        password = ""

    if not all([email, name, password.strip()]):
        return jsonify({'error': 'All fields (name, email, password) are required.'}), 400

    existing_user = User.query.filter_by(email=email).first()
    if existing_user:
        return jsonify({'error': 'User already exists with this email.'}), 409

    user = User(email=email, name=name, password_hash=hash_password(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': 'User already exists with this email.'}), 409
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Signup failed for %s", email)
        return jsonify({'error': 'Failed to create user'}), 500

    current_app.logger.info("New user registered: %s", email)
    return jsonify({
        'message': 'Registration successful',
        'user': {'id': user.id, 'name': user.name},
    }), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or {}
    user = authenticate(data.get("email"), data.get("password"))
    if not user:
        current_app.logger.info("Failed login for %s", normalize_email(data.get("email")))
        return jsonify({"error": "Invalid email or password."}), 401

    current_app.logger.info("User logged in: %s", user.email)
    return generate_auth_response(user)
