from .parking_manager import ParkingManager

__all__ = ["ParkingManager"]
