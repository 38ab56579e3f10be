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

"""Privileged writes to sysfs control files."""

import os

from oslo_log import log as logging

from fc_brick import privileged


LOG = logging.getLogger(__name__)


def write_file(path, data, mode=0o666):
    """Write data to a file, creating it with mode if it doesn't exist.

    Runs in the calling process.  sysfs attributes act on a single write
    call, so the whole payload is written at once.
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    try:
        os.write(fd, data)
    finally:
        os.close(fd)


@privileged.default.entrypoint
def write_sys_file(path, data, mode=0o666):
    LOG.debug('Writing %(data)r to %(path)s', {'data': data, 'path': path})
    write_file(path, data, mode)
