"""
Print Broker Models
"""

from .job import PrintJob, LabelJob, parse_body
from .result import PrintResult

__all__ = ['PrintJob', 'LabelJob', 'PrintResult', 'parse_body']
