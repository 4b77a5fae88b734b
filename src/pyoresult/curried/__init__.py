"""Data-last combinators, one module per type.

```python
>>> import pyoresult as pr
>>> from pyoresult.curried import option, result
>>> option.unwrap_or(0)(5), result.unwrap_or(0)(pr.Err("x"))
(5, 0)

```
"""

from . import option, result

__all__ = ["option", "result"]
