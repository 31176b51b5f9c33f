"""initial

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone_number", sa.String(length=40), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "airports",
        sa.Column("code", sa.String(length=3), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("city", sa.String(length=120), nullable=False),
        sa.Column("country", sa.String(length=120), nullable=False),
    )
    op.create_index("ix_airports_city", "airports", ["city"])

    op.create_table(
        "airlines",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("logo_url", sa.String(length=512), nullable=True),
    )

    op.create_table(
        "flights",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("flight_number", sa.String(length=10), nullable=False),
        sa.Column("airline_id", sa.String(length=10), sa.ForeignKey("airlines.id"), nullable=False),
        sa.Column("departure_airport", sa.String(length=3), sa.ForeignKey("airports.code"), nullable=False),
        sa.Column("arrival_airport", sa.String(length=3), sa.ForeignKey("airports.code"), nullable=False),
        sa.Column("departure_time", sa.DateTime(), nullable=False),
        sa.Column("arrival_time", sa.DateTime(), nullable=False),
        sa.Column("base_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("available_seats", sa.Integer(), nullable=False),
        sa.CheckConstraint("available_seats >= 0", name="ck_flights_available_seats_non_negative"),
    )
    op.create_index("ix_flights_airline_id", "flights", ["airline_id"])
    op.create_index("ix_flights_departure_airport", "flights", ["departure_airport"])
    op.create_index("ix_flights_arrival_airport", "flights", ["arrival_airport"])
    op.create_index("ix_flights_departure_time", "flights", ["departure_time"])

    op.create_table(
        "flight_bookings",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("user_id", sa.String(length=10), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("outbound_flight_id", sa.String(length=10), sa.ForeignKey("flights.id"), nullable=False),
        sa.Column("return_flight_id", sa.String(length=10), sa.ForeignKey("flights.id"), nullable=True),
        sa.Column("booking_date", sa.Date(), nullable=False),
        sa.Column("number_of_passengers", sa.Integer(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_status", sa.String(length=20), nullable=False, server_default="Pending"),
    )
    op.create_index("ix_flight_bookings_user_id", "flight_bookings", ["user_id"])
    op.create_index("ix_flight_bookings_outbound_flight_id", "flight_bookings", ["outbound_flight_id"])

    op.create_table(
        "flight_passengers",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("booking_id", sa.String(length=10), sa.ForeignKey("flight_bookings.id"), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("title", sa.String(length=10), nullable=False, server_default=""),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("date_of_birth", sa.String(length=20), nullable=False, server_default=""),
        sa.Column("passport_number", sa.String(length=40), nullable=False, server_default=""),
    )
    op.create_index("ix_flight_passengers_booking_id", "flight_passengers", ["booking_id"])

    op.create_table(
        "destinations",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("image_url", sa.String(length=512), nullable=True),
    )

    op.create_table(
        "packages",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("destination_id", sa.String(length=10), sa.ForeignKey("destinations.id"), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("image_url", sa.String(length=512), nullable=True),
    )
    op.create_index("ix_packages_destination_id", "packages", ["destination_id"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("user_id", sa.String(length=10), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("package_id", sa.String(length=10), sa.ForeignKey("packages.id"), nullable=False),
        sa.Column("booking_date", sa.Date(), nullable=False),
        sa.Column("travel_date", sa.Date(), nullable=False),
        sa.Column("number_of_travelers", sa.Integer(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_status", sa.String(length=20), nullable=False, server_default="Pending"),
    )
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"])
    op.create_index("ix_bookings_package_id", "bookings", ["package_id"])

    op.create_table(
        "payments",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("booking_id", sa.String(length=10), sa.ForeignKey("bookings.id"), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("payment_status", sa.String(length=20), nullable=False, server_default="Pending"),
        sa.Column("payment_date", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_payments_booking_id", "payments", ["booking_id"])

    op.create_table(
        "review_ratings",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("user_id", sa.String(length=10), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("package_id", sa.String(length=10), sa.ForeignKey("packages.id"), nullable=False),
        sa.Column("review_text", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.UniqueConstraint("user_id", "package_id", name="uq_review_user_package"),
    )
    op.create_index("ix_review_ratings_user_id", "review_ratings", ["user_id"])
    op.create_index("ix_review_ratings_package_id", "review_ratings", ["package_id"])

    op.create_table(
        "wishlists",
        sa.Column("id", sa.String(length=10), primary_key=True),
        sa.Column("user_id", sa.String(length=10), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("package_id", sa.String(length=10), sa.ForeignKey("packages.id"), nullable=False),
        sa.UniqueConstraint("user_id", "package_id", name="uq_wishlist_user_package"),
    )
    op.create_index("ix_wishlists_user_id", "wishlists", ["user_id"])
    op.create_index("ix_wishlists_package_id", "wishlists", ["package_id"])


def downgrade() -> None:
    for table in (
        "wishlists", "review_ratings", "payments", "bookings", "packages", "destinations",
        "flight_passengers", "flight_bookings", "flights", "airlines", "airports", "users",
    ):
        op.drop_table(table)
