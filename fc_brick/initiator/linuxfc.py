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

"""Generic linux Fibre Channel utilities."""

from typing import Optional, Tuple  # noqa: H301

from oslo_log import log as logging

from fc_brick import exception
from fc_brick import initiator
from fc_brick.initiator import linuxscsi

LOG = logging.getLogger(__name__)

DiskMatch = Tuple[Optional[str], Optional[str]]


class LinuxFibreChannel(linuxscsi.LinuxSCSI):

    def _resolve_disk(self, link: str) -> DiskMatch:
        disk = self._io.realpath(link)
        device_name = linuxscsi.get_device_name(disk)
        return disk, self.find_multipath_device_for_device(device_name)

    def find_disk_by_wwn(self, wwn: str, lun: str) -> DiskMatch:
        """Find the device for a target WWN and LUN and its dm parent.

        The by-path entry names carry the HBA topology before the FC part, so
        the FC fragment is matched anywhere in the name.

        :returns: Tuple with the device path and the multipath device path,
                  ie: ('/dev/sdb', '/dev/dm-1').  Any of them may be None.
        """
        fc_path = '-fc-0x' + wwn + '-lun-' + lun
        dev_path = initiator.BY_PATH_DIR
        try:
            names = self._io.list_dir(dev_path)
        except OSError as exc:
            LOG.debug('Could not list %(path)s: %(exc)s',
                      {'path': dev_path, 'exc': exc})
            return None, None

        for name in names:
            if fc_path not in name:
                continue
            try:
                return self._resolve_disk(dev_path + name)
            except (OSError, exception.BrickException) as exc:
                LOG.debug('Skipping %(link)s: %(exc)s',
                          {'link': dev_path + name, 'exc': exc})
        return None, None

    def find_disk_by_wwid(self, wwid: str) -> DiskMatch:
        """Find the device for a WWID and its dm parent.

        Example wwid format:
            3600508b400105e210000900000490000
            <VENDOR NAME> <IDENTIFIER NUMBER>
        Example of symlink under by-id:
            /dev/disk/by-id/scsi-3600508b400105e210000900000490000
            /dev/disk/by-id/scsi-<VENDOR NAME>_<IDENTIFIER NUMBER>
        White space in a wwid is replaced with underscores by udev, so
        callers must pass the wwid the way it shows up under by-id.

        :returns: Tuple with the device path and the multipath device path.
                  Any of them may be None.
        """
        fc_path = initiator.BY_ID_SCSI_PREFIX + wwid
        dev_id = initiator.BY_ID_DIR
        try:
            names = self._io.list_dir(dev_id)
        except OSError as exc:
            LOG.debug('Could not list %(path)s: %(exc)s',
                      {'path': dev_id, 'exc': exc})
            names = []

        if fc_path in names:
            link = dev_id + fc_path
            try:
                disk = self._io.realpath(link)
            except OSError as exc:
                LOG.error('Failed to find a corresponding disk from symlink '
                          '%(link)s: %(exc)s', {'link': link, 'exc': exc})
                return None, None

            # The raw device is reported even if the multipath lookup fails.
            dm = None
            try:
                dm = self.find_multipath_device_for_device(
                    linuxscsi.get_device_name(disk))
            except exception.BrickException as exc:
                LOG.warning('Could not look up the multipath device of '
                            '%(disk)s: %(exc)s', {'disk': disk, 'exc': exc})
            return disk, dm

        LOG.error('Failed to find a disk at %s', dev_id + fc_path)
        return None, None
