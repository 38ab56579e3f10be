#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.
#
"""Utilities and helper functions."""

import functools
import inspect
import logging as py_logging
from typing import Callable

from oslo_log import log as logging
from oslo_utils import timeutils


LOG = logging.getLogger(__name__)


def _call_arguments(f, args, kwargs):
    bound = inspect.signature(f).bind(*args, **kwargs)
    bound.apply_defaults()
    return {name: value for name, value in bound.arguments.items()
            if name != 'self'}


def trace(f: Callable) -> Callable:
    """Log entry, exit and elapsed time of the decorated method at DEBUG.

    The logger is the one of the module defining the instance's class, so
    connector calls show up next to the connector's own messages.  The call
    line carries the bound arguments (``connection_properties``,
    ``device_path``) and the exit line the returned device info or the
    exception.

    Apply it as the outermost decorator.
    """

    func_name = f.__name__

    @functools.wraps(f)
    def trace_logging_wrapper(*args, **kwargs):
        owner = args[0] if args else kwargs.get('self')
        if owner is not None and hasattr(owner, '__module__'):
            logger = logging.getLogger(owner.__module__)
        else:
            logger = LOG

        if not logger.isEnabledFor(py_logging.DEBUG):
            return f(*args, **kwargs)

        logger.debug('==> %(func)s: call %(args)r',
                     {'func': func_name,
                      'args': _call_arguments(f, args, kwargs)})

        start = timeutils.now()
        try:
            result = f(*args, **kwargs)
        except Exception as exc:
            logger.debug('<== %(func)s: exception (%(time)dms) %(exc)r',
                         {'func': func_name,
                          'time': (timeutils.now() - start) * 1000,
                          'exc': exc})
            raise

        logger.debug('<== %(func)s: return (%(time)dms) %(result)r',
                     {'func': func_name,
                      'time': (timeutils.now() - start) * 1000,
                      'result': result})
        return result
    return trace_logging_wrapper
