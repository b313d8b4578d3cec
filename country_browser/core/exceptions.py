class CountryBrowserError(Exception):
    """Base exception for all country_browser errors"""
    pass

class FetchError(CountryBrowserError):
    """
    Fetching the country list failed: transport error, bad status,
    or a payload that could not be decoded into Country records
    """
    pass

class UnknownBucketError(CountryBrowserError, KeyError):
    """A population bucket label outside the fixed option set was used"""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown population bucket"

class ConfigError(CountryBrowserError):
    """Invalid or inconsistent environment configuration"""
    pass
