from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from vidly.core.config import Settings
from vidly.core.ids import new_object_id
from vidly.core.security import Identity, create_access_token
from vidly.main import create_app
from vidly.models import (
    Customer,
    CustomerSnapshot,
    Genre,
    GenreSnapshot,
    Movie,
    MovieSnapshot,
    Rental,
)


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_token(settings):
    def _make(*, is_admin=False, user_id=None):
        identity = Identity(id=user_id or new_object_id(), is_admin=is_admin)
        return create_access_token(identity, settings)

    return _make


@pytest.fixture
def token(make_token):
    return make_token()


@pytest.fixture
def admin_token(make_token):
    return make_token(is_admin=True)


@pytest.fixture
def genre(db):
    genre = Genre(name="genre1")
    db.add(genre)
    db.commit()
    db.refresh(genre)
    return genre


@pytest.fixture
def customer(db):
    customer = Customer(name="customer1", phone="123456", is_gold=False)
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@pytest.fixture
def movie(db):
    movie = Movie(
        title="12345",
        genre=GenreSnapshot(id=new_object_id(), name="12345"),
        number_in_stock=10,
        daily_rental_rate=Decimal("2"),
    )
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie


@pytest.fixture
def make_rental(db, movie):
    def _make(*, date_out=None, is_gold=False, date_returned=None, customer_id=None):
        rental = Rental(
            customer=CustomerSnapshot(
                id=customer_id or new_object_id(),
                name="12345",
                phone="12345",
                is_gold=is_gold,
            ),
            movie=MovieSnapshot(
                id=movie.id,
                title=movie.title,
                daily_rental_rate=movie.daily_rental_rate,
            ),
            date_out=date_out or datetime.now(timezone.utc),
            date_returned=date_returned,
        )
        db.add(rental)
        db.commit()
        db.refresh(rental)
        return rental

    return _make
