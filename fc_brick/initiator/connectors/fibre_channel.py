# All Rights Reserved.
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

from oslo_config import cfg
from oslo_log import log as logging

from fc_brick import exception
from fc_brick.i18n import _
from fc_brick import initiator
from fc_brick import io_handler
from fc_brick.initiator import linuxfc
from fc_brick import utils

LOG = logging.getLogger(__name__)
CONF = cfg.CONF


class FibreChannelConnector(io_handler.Inspector):
    """Connector class to attach/detach Fibre Channel volumes."""

    def __init__(self, io=None, rescan_on_miss=None, *args, **kwargs):
        self._linuxfc = linuxfc.LinuxFibreChannel(io)
        super(FibreChannelConnector, self).__init__(io, *args, **kwargs)
        if rescan_on_miss is None:
            rescan_on_miss = CONF.fc_brick.rescan_on_miss
        self.rescan_on_miss = rescan_on_miss

    def set_io_handler(self, io):
        super(FibreChannelConnector, self).set_io_handler(io)
        self._linuxfc.set_io_handler(self._io)

    @staticmethod
    def _get_disk_ids(connection_properties):
        """Return the identifiers to search for and how to search them.

        WWNs take precedence, wwids are only used when there are no WWNs.

        :returns: Tuple of (use_wwns, ids, lun)
        """
        target_wwns = connection_properties.get('target_wwns')
        target_wwn = connection_properties.get('target_wwn')
        if isinstance(target_wwns, str) and target_wwns:
            wwns = [target_wwns]
        elif target_wwns:
            wwns = target_wwns
        elif isinstance(target_wwn, list):
            wwns = target_wwn
        elif isinstance(target_wwn, str) and target_wwn:
            wwns = [target_wwn]
        else:
            wwns = []

        if wwns:
            lun = connection_properties.get('target_lun', 0)
            if not isinstance(lun, (int, str)) or isinstance(lun, bool):
                msg = _("Invalid target_lun %r.") % (lun,)
                raise exception.InvalidParameterValue(err=msg)
            return True, list(wwns), str(lun)

        return False, list(connection_properties.get('wwids') or []), None

    def _search_disk(self, connection_properties):
        use_wwns, disk_ids, lun = self._get_disk_ids(connection_properties)

        disk = None
        dm = None
        rescanned = False
        # Two phase search: look for the existing device paths first and stop
        # if a multipath DM is found.  Otherwise rescan the SCSI bus once and
        # search again, returning with any findings.
        while True:
            for disk_id in disk_ids:
                if use_wwns:
                    found, dm = self._linuxfc.find_disk_by_wwn(disk_id, lun)
                else:
                    found, dm = self._linuxfc.find_disk_by_wwid(disk_id)
                if found:
                    disk = found
                if dm:
                    break

            if rescanned or dm or not self.rescan_on_miss:
                break

            LOG.info("Fibre Channel multipath device not found, rescanning "
                     "SCSI hosts and searching again.")
            try:
                self._linuxfc.rescan_hosts()
            except exception.SysfsIOError as exc:
                LOG.warning("Could not rescan SCSI hosts: %s", exc)
            rescanned = True

        if dm:
            return dm, True
        if disk:
            return disk, False

        LOG.error("Fibre Channel volume device not found.")
        raise exception.NoFibreChannelVolumeDeviceFound()

    @utils.trace
    def connect_volume(self, connection_properties):
        """Attach the volume to the host.

        :param connection_properties: The dictionary that describes all
                                      of the target volume attributes.
        :type connection_properties: dict
        :returns: dict

        connection_properties for Fibre Channel must include either:
        target_wwns - List of World Wide Names (or target_wwn)
        target_lun - LUN id of the volume
        or:
        wwids - List of World Wide Identifiers
        """
        LOG.info("Attaching Fibre Channel volume %s",
                 connection_properties.get('volume_name'))
        path, multipath = self._search_disk(connection_properties)
        LOG.debug("Found Fibre Channel volume %(name)s (multipath: "
                  "%(mpath)s)", {'name': path, 'mpath': multipath})
        return {'type': 'block', 'path': path, 'multipath': multipath}

    @utils.trace
    def disconnect_volume(self, device_path):
        """Detach the volume from the host.

        Every path of a multipath device is removed from the SCSI subsystem,
        even if removing a previous one failed.

        :param device_path: Device path returned by connect_volume or any
                            symlink pointing to it.
        :raises DeviceRemovalFailed: with the last failure if removing any
                                     device failed.
        """
        LOG.info("Detaching Fibre Channel volume %s", device_path)
        try:
            dst_path = self._io.realpath(device_path)
        except OSError as exc:
            raise exception.VolumeDeviceNotFound(device=device_path) from exc

        if dst_path.startswith(initiator.DEV_DM_PREFIX):
            devices = self._linuxfc.find_slave_devices(dst_path)
        else:
            devices = [dst_path]

        LOG.debug("Disconnect device_path: %(path)s, dst_path: %(dst)s, "
                  "devices: %(devices)s",
                  {'path': device_path, 'dst': dst_path, 'devices': devices})

        last_failure = None
        for device in devices:
            try:
                self._linuxfc.remove_scsi_device(device)
            except exception.BrickException as exc:
                LOG.error("Removing device %(device)s failed: %(exc)s",
                          {'device': device, 'exc': exc})
                last_failure = (device, exc)

        if last_failure:
            device, exc = last_failure
            LOG.error("Last error occurred during detach of %(path)s: "
                      "%(exc)s", {'path': device_path, 'exc': exc})
            raise exception.DeviceRemovalFailed(device=device,
                                                reason=exc) from exc
