# Import all models so Base.metadata is complete (Alembic autogenerate, create_all in tests)
from app.db.session import Base  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.airport import Airport  # noqa: F401
from app.models.airline import Airline  # noqa: F401
from app.models.flight import Flight  # noqa: F401
from app.models.flight_booking import FlightBooking  # noqa: F401
from app.models.flight_passenger import FlightPassenger  # noqa: F401
from app.models.destination import Destination  # noqa: F401
from app.models.package import Package  # noqa: F401
from app.models.booking import Booking  # noqa: F401
from app.models.payment import Payment  # noqa: F401
from app.models.review import ReviewRating  # noqa: F401
from app.models.wishlist import Wishlist  # noqa: F401
