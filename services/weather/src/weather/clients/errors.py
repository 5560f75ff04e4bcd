"""Failures of the two third-party lookups, classified where they happen."""


class GeocodeError(Exception):
    """The postal code could not be turned into a locality."""

    kind = "geocode_error"


class GeocodeLookupError(GeocodeError):
    """Provider answered with a non-200 status or an undecodable body."""

    kind = "lookup_failed"


class LocalityNotFoundError(GeocodeError):
    """Provider answered 200 without a usable locality."""

    kind = "locality_not_found"


class GeocodeTransportError(GeocodeError):
    """Request never got a response."""

    kind = "transport_error"


class WeatherProviderError(Exception):
    """The current temperature could not be obtained."""

    kind = "weather_error"


class WeatherProviderStatusError(WeatherProviderError):
    kind = "provider_error"


class TemperatureFieldMissingError(WeatherProviderError):
    kind = "field_missing"


class WeatherTransportError(WeatherProviderError):
    kind = "transport_error"
