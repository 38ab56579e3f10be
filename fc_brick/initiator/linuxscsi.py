# (c) Copyright 2013 Hewlett-Packard Development Company, L.P.
#
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

"""Generic linux scsi subsystem and Multipath utilities.

   Note, this is not iSCSI.
"""
import collections
from typing import List, Optional  # noqa: H301

from oslo_log import log as logging

from fc_brick import exception
from fc_brick import initiator
from fc_brick import io_handler

LOG = logging.getLogger(__name__)

RescanResult = collections.namedtuple('RescanResult', ['attempted', 'failed'])


def _split_dev_path(path: str) -> Optional[List[str]]:
    # /dev/sdX splits into '', 'dev', 'sdX'
    parts = path.split('/')
    if len(parts) == 3 and parts[1].startswith('dev'):
        return parts
    return None


def get_device_name(path: str) -> str:
    """Return the device name of a resolved /dev path.

    Only shallow paths like /dev/sdX are accepted, so /dev/sdX gives sdX.

    :raises InvalidDevicePath: if path isn't a /dev/<name> path
    """
    parts = _split_dev_path(path)
    if parts is None:
        raise exception.InvalidDevicePath(path=path)
    return parts[2]


def get_multipath_name(dm_path: str) -> Optional[str]:
    """Return the dm-N name of a /dev/dm-N path, or None if malformed."""
    parts = _split_dev_path(dm_path)
    return parts[2] if parts else None


class LinuxSCSI(io_handler.Inspector):

    def echo_scsi_command(self, path, content) -> None:
        """Used to echo strings to scsi subsystem."""
        try:
            self._io.write_file(path, content, initiator.SYSFS_WRITE_MODE)
        except OSError as exc:
            raise exception.SysfsIOError(path=path, reason=exc) from exc

    def find_multipath_device_for_device(self,
                                         device_name: str) -> Optional[str]:
        """Find the device mapper parent of a device.

        :param device_name: Device name, not a path. ie: 'sda'
        :returns: String with the dm path or None if not found.
                  ie: '/dev/dm-0'
        """
        sys_path = initiator.SYS_BLOCK_DIR
        try:
            names = self._io.list_dir(sys_path)
        except OSError as exc:
            raise exception.SysfsIOError(path=sys_path, reason=exc) from exc

        for name in names:
            if not name.startswith(initiator.DM_PREFIX):
                continue
            try:
                self._io.lstat(sys_path + name + '/slaves/' + device_name)
            except OSError:
                continue
            LOG.debug('Device %(dev)s is a slave of %(dm)s',
                      {'dev': device_name, 'dm': name})
            return initiator.DEV_PATH + name
        return None

    def find_slave_devices(self, dm_path: str) -> List[str]:
        """Return all the slave device paths of a multipath device.

        :param dm_path: Device mapper path. ie: '/dev/dm-1'
        :returns: List of paths, ie: ['/dev/sda', '/dev/sdb'].  Empty if the
                  path is malformed or no slave could be listed.
        """
        dm = get_multipath_name(dm_path)
        if not dm:
            LOG.debug('%s is not a device mapper path', dm_path)
            return []

        slaves_path = initiator.SYS_BLOCK_DIR + dm + '/slaves/'
        try:
            slaves = self._io.list_dir(slaves_path)
        except OSError as exc:
            LOG.debug('Could not list slaves of %(dm)s: %(exc)s',
                      {'dm': dm_path, 'exc': exc})
            return []
        return [initiator.DEV_PATH + slave for slave in slaves]

    def remove_scsi_device(self, device: str) -> None:
        """Removes a scsi device based upon /dev/sdX name."""
        if not device.startswith(initiator.DEV_PATH):
            raise exception.InvalidDevicePath(path=device)

        device_name = device.split('/')[-1]
        path = initiator.SYS_BLOCK_DIR + device_name + '/device/delete'
        LOG.debug("Remove SCSI device %(device)s with %(path)s",
                  {'device': device, 'path': path})
        self.echo_scsi_command(path, initiator.DELETE_DEVICE)

    def rescan_hosts(self) -> RescanResult:
        """Ask every SCSI host to scan all channels, targets and luns.

        Failing to trigger the scan on one host doesn't prevent scanning
        the rest.

        :raises SysfsIOError: if the SCSI hosts can't be listed
        """
        scsi_path = initiator.SCSI_HOST_DIR
        try:
            hosts = self._io.list_dir(scsi_path)
        except OSError as exc:
            raise exception.SysfsIOError(path=scsi_path, reason=exc) from exc

        failed = 0
        for host in hosts:
            LOG.debug('Scanning host %s', host)
            try:
                self.echo_scsi_command(scsi_path + host + '/scan',
                                       initiator.SCAN_ALL)
            except exception.SysfsIOError as exc:
                LOG.warning('Failed to rescan SCSI host %(host)s: %(exc)s',
                            {'host': host, 'exc': exc})
                failed += 1

        result = RescanResult(attempted=len(hosts), failed=failed)
        LOG.debug('Rescanned SCSI hosts: %s', result)
        return result
