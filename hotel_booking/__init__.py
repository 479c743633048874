"""
Hotel Booking - role-based hotel reservation service
"""
__version__ = "1.0.0"
