from .airline_brand import AirlineBrand as AirlineBrand
