"""
Subscription model (table: subscriptions).

A service plan sold by the ISP (mobile, fixed line, TV, internet).
"""

from datetime import datetime

from isp_backoffice.extensions import db

SUBSCRIPTION_TYPES = (
    "MOBILE",
    "FIXED",
    "TV",
    "MOBILE_INTERNET",
    "FIXED_INTERNET",
)


class Subscription(db.Model):
    __tablename__ = "subscriptions"

    id = db.Column(db.Integer, primary_key=True)

    description = db.Column(db.String(255), nullable=False)
    subscription_type = db.Column("type", db.String(32), nullable=False, index=True)

    # Included traffic (Gb/s)
    traffic = db.Column(db.Integer, nullable=False, default=0)

    price = db.Column(db.Numeric(15, 2), nullable=False)
    extra_traffic_price = db.Column(db.Numeric(15, 2), nullable=False)

    # Timestamps
    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<Subscription id={self.id} type={self.subscription_type!r} "
            f"price={self.price}>"
        )
