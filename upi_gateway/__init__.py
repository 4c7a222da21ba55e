"""UPI collect / payout proxy for the Razorpay API."""

__version__ = "1.0.0"
