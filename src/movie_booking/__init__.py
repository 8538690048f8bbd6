"""
Movie Booking - atomic booking creation and booking history
"""
__version__ = "1.0.0"
