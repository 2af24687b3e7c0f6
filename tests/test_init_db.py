from sqlalchemy.orm import sessionmaker

from app.core import init_db
from app.models.visitor import Visitor


def test_seed_initial_data_only_when_empty(db_engine, monkeypatch):
    TestingSession = sessionmaker(bind=db_engine, expire_on_commit=False)
    monkeypatch.setattr(init_db, "SessionLocal", TestingSession)

    init_db.seed_initial_data()
    init_db.seed_initial_data()

    session = TestingSession()
    try:
        visitors = session.query(Visitor).order_by(Visitor.id).all()
        assert len(visitors) == len(init_db.DEMO_VISITORS)
        assert [v.otp for v in visitors] == [d["otp"] for d in init_db.DEMO_VISITORS]
        assert not any(v.arrived for v in visitors)
    finally:
        session.close()
