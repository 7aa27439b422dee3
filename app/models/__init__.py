# Import every model here so Alembic autogenerate can discover them
# and so Base.metadata.create_all() works in tests and at startup.

from app.models.waitlist import WaitlistSignup        # noqa: F401
from app.models.comment import Comment                # noqa: F401
