from .analytics import aggregate, available_filter_values, filter_trips, reconcile_filters
from .costing import car_trip_cost, transit_fare, walking_cost
from .emissions import car_trip_emissions
from .synthesize import synthesize_options, select_option
from .trips import confirm_trip
