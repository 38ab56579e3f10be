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

"""Filesystem access used to inspect and drive the SCSI subsystem.

Every helper in fc-brick reads /dev and /sys and writes sysfs control files
through an IO handler instead of calling the os module directly.  Callers
can inject their own handler (tests, containers with a different root) and
the default one talks to the host.
"""

import abc
import os
from typing import List  # noqa: H301

from oslo_config import cfg

from fc_brick import opts  # noqa: F401
from fc_brick.privileged import sysfs as priv_sysfs

CONF = cfg.CONF


class IOHandler(object, metaclass=abc.ABCMeta):
    """Filesystem primitives.

    Implementations must be stateless and raise OSError on failure.
    """

    @abc.abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """Return the names of the entries in a directory."""

    @abc.abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        """Stat a path without following a final symlink."""

    @abc.abstractmethod
    def realpath(self, path: str) -> str:
        """Resolve all symlinks in path.  The target must exist."""

    @abc.abstractmethod
    def write_file(self, path: str, data: str, mode: int = 0o666) -> None:
        """Write data to path."""


class OSIOHandler(IOHandler):
    """IO handler backed by the host filesystem."""

    def __init__(self, use_privsep=None):
        if use_privsep is None:
            use_privsep = CONF.fc_brick.use_privsep
        self.use_privsep = use_privsep

    def list_dir(self, path):
        return os.listdir(path)

    def lstat(self, path):
        return os.lstat(path)

    def realpath(self, path):
        # os.path.realpath doesn't fail on dangling links, but we need to
        os.stat(path)
        return os.path.realpath(path)

    def write_file(self, path, data, mode=0o666):
        if self.use_privsep:
            priv_sysfs.write_sys_file(path, data, mode)
        else:
            priv_sysfs.write_file(path, data, mode)


class Inspector(object):
    """Base class for helpers that go through an IO handler."""

    def __init__(self, io=None, *args, **kwargs):
        self.set_io_handler(io)

    def set_io_handler(self, io):
        if io is None:
            io = OSIOHandler()
        self._io = io
