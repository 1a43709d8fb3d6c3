# Import the VehicleAgent class, which prices and scores car trips
# for one fleet vehicle (cost, emissions, eco flag)
from .vehicle_agent import VehicleAgent

# Import the TripAgent class: a numeric view over one persisted trip record
from .trip_agent import TripAgent

# Import the FleetAgent class, which folds many trips into fleet metrics
from .fleet_agent import FleetAgent
