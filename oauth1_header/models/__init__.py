"""
Data models for OAuth 1.0a request signing.
"""
from .credentials import Credentials
from .request import RequestDescriptor
from .param_value import ParamValue, ParamKind, ExtraParams, stringify, iter_param_pairs

__all__ = [
    'Credentials',
    'RequestDescriptor',
    'ParamValue',
    'ParamKind',
    'ExtraParams',
    'stringify',
    'iter_param_pairs',
]
