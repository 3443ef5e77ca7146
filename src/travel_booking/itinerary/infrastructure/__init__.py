from .brand_registry import build_reservation_factory as build_reservation_factory
