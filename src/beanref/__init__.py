from beanref.errors import ConfigurationError, NamingError, UnmatchedURLError
from beanref.identifier import EnterpriseBeanResourceIdentifier, ResourceIdentifier
from beanref.properties import Properties, PropertiesSource
from beanref.urls import ParsedBeanUrl, build_bean_url, parse_bean_url

__all__ = [
    "ConfigurationError",
    "EnterpriseBeanResourceIdentifier",
    "NamingError",
    "ParsedBeanUrl",
    "Properties",
    "PropertiesSource",
    "ResourceIdentifier",
    "UnmatchedURLError",
    "build_bean_url",
    "parse_bean_url",
]
