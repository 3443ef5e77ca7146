from .hotel_brand import HotelBrand as HotelBrand
