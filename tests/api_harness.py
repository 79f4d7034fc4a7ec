"""Shared TestClient setup: the real app wired to a private in-memory SQLite database."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bulletin.core.database import build_engine, get_db
from bulletin.core.enums import UserRole
from bulletin.main import app
from bulletin.models import Base, Category
from bulletin.repositories import UserRepository
from bulletin.schemas.user import UserCreate
from bulletin.services.users import register_user

PASSWORD = "correct-horse-battery"


class ApiHarness:
    """Fresh database per instance; overrides get_db on the shared app."""

    def __init__(self) -> None:
        self.engine = build_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

        def _get_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_db
        self.client = TestClient(app)

    def close(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()
        self.engine.dispose()

    def create_user(self, email: str, role: UserRole = UserRole.PARTICIPANT) -> int:
        db = self.Session()
        try:
            user = register_user(
                UserRepository(db),
                UserCreate(
                    first_name=email.split("@")[0].title(),
                    last_name="Tester",
                    email=email,
                    password=PASSWORD,
                    role=role,
                ),
                bcrypt_rounds=4,
                allow_admin=True,
            )
            return user.id
        finally:
            db.close()

    def create_category(self, name: str = "Books") -> int:
        db = self.Session()
        try:
            category = Category(name=name, description=f"{name} for sale")
            db.add(category)
            db.commit()
            return category.id
        finally:
            db.close()

    def login(self, email: str, password: str = PASSWORD) -> str:
        resp = self.client.post("/api/v1/users/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["access_token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
