"""Infrastructure for the backend double.

The generic dispatch core: call-site resolution, the result table and the
operation catalogue that together let one accessor serve every operation.
"""

from .call_site import operation_name
from .operation_catalogue import OperationSpec, build_catalogue
from .result_table import ResultTable

__all__ = [
    "OperationSpec",
    "ResultTable",
    "build_catalogue",
    "operation_name",
]
