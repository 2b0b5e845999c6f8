"""
Customer model (table: customers).

A subscriber of the ISP, identified by its national id (CNP).
"""

from datetime import datetime

from isp_backoffice.extensions import db


class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.Integer, primary_key=True)

    name = db.Column(db.String(20), nullable=False, index=True)
    fullname = db.Column(db.String(50), nullable=False)
    address = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    cnp = db.Column(db.String(13), nullable=False, index=True)

    # Timestamps
    created_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name!r}>"
