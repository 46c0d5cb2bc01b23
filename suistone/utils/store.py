"""
Store availability for request handlers
The database is checked once per request; handlers that need it are wrapped
so the degraded-mode response lives in one place.
"""
import enum
from functools import wraps

from flask import current_app, g, jsonify, request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError


class StoreStatus(enum.Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class StoreHandle:
    """Database capability handed to views, with a status fixed for the request"""

    def __init__(self, engine):
        self.engine = engine
        self._status = None

    def ping(self):
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            current_app.logger.warning(f"Store unreachable: {e}")
            return StoreStatus.DISCONNECTED
        return StoreStatus.CONNECTED

    @property
    def status(self):
        if self._status is None:
            self._status = self.ping()
        return self._status

    @property
    def connected(self):
        return self.status is StoreStatus.CONNECTED


def get_store():
    """Return this request's store handle"""
    from suistone.game.models import db

    if 'store' not in g:
        g.store = StoreHandle(db.engine)
    return g.store


def store_fallback(fallback):
    """
    Serve fallback instead of the view while the store is disconnected.
    fallback is a (body, status) pair or a callable taking the view's
    keyword arguments and returning one. The view receives the handle as `store`.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            store = get_store()
            if not store.connected:
                body, status = fallback(**kwargs) if callable(fallback) else fallback
                current_app.logger.info(f"Store offline, serving fallback for {request.path}")
                return jsonify(body), status
            return view(*args, store=store, **kwargs)
        return wrapper
    return decorator


def require_fields(*names, source='args', message=None):
    """Reject the request with 400 when a required field is absent"""
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if source == 'json':
                data = request.get_json(silent=True)
            else:
                data = request.args
            if not isinstance(data, dict) and source == 'json':
                data = {}

            missing = [name for name in names if data.get(name) in (None, '')]
            if missing:
                error = message or f"Missing required fields: {', '.join(missing)}"
                return jsonify({'error': error}), 400
            return view(*args, **kwargs)
        return wrapper
    return decorator
