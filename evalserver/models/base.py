import uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    """Generate a primary key for rows identified by UUID strings."""
    return str(uuid.uuid4())
