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

from unittest import mock

from fc_brick import exception
from fc_brick.initiator import linuxfc
from fc_brick.tests import base
from fc_brick.tests import fake_io

WWN = '500a0981891b8dc5'
BY_PATH = 'pci-0000:05:00.2-fc-0x500a0981891b8dc5-lun-1'
WWID = '3600508b400105e210000900000490000'


class LinuxFCTestCase(base.TestCase):

    def setUp(self):
        super(LinuxFCTestCase, self).setUp()
        self.io = fake_io.FakeIOHandler()
        self.io.add_device('sda', 'sdb')
        self.lfc = linuxfc.LinuxFibreChannel(io=self.io)

    def test_find_disk_by_wwn(self):
        self.io.add_by_path(BY_PATH, '/dev/sdb')
        self.assertEqual(('/dev/sdb', None),
                         self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_multipath(self):
        self.io.add_by_path(BY_PATH, '/dev/sdb')
        self.io.add_multipath('dm-1', 'sda', 'sdb')
        self.assertEqual(('/dev/sdb', '/dev/dm-1'),
                         self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_substring_match(self):
        # Partition links carry a suffix after the lun
        self.io.add_by_path(BY_PATH + '-part1', '/dev/sda')
        self.assertEqual(('/dev/sda', None),
                         self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_other_lun(self):
        self.io.add_by_path(BY_PATH.replace('lun-1', 'lun-2'), '/dev/sda')
        self.assertEqual((None, None), self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_no_by_path(self):
        self.assertEqual((None, None), self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_skips_broken_link(self):
        self.io.add_dir('/dev/disk/by-path', 'ip-' + BY_PATH)
        self.io.links['/dev/disk/by-path/ip-' + BY_PATH] = '/dev/sdz'
        self.io.add_by_path(BY_PATH, '/dev/sdb')
        self.assertEqual(('/dev/sdb', None),
                         self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_skips_nested_device(self):
        self.io.add_by_path('a' + BY_PATH, '/dev/mapper/mpatha')
        self.io.add_by_path(BY_PATH, '/dev/sdb')
        self.assertEqual(('/dev/sdb', None),
                         self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwn_sys_block_error(self):
        self.io.add_by_path(BY_PATH, '/dev/sdb')
        self.io.fail('list_dir', '/sys/block')
        self.assertEqual((None, None), self.lfc.find_disk_by_wwn(WWN, '1'))

    def test_find_disk_by_wwid(self):
        self.io.add_by_id('scsi-' + WWID, '/dev/sda')
        self.assertEqual(('/dev/sda', None),
                         self.lfc.find_disk_by_wwid(WWID))

    def test_find_disk_by_wwid_multipath(self):
        self.io.add_by_id('scsi-' + WWID, '/dev/sda')
        self.io.add_multipath('dm-0', 'sda')
        self.assertEqual(('/dev/sda', '/dev/dm-0'),
                         self.lfc.find_disk_by_wwid(WWID))

    def test_find_disk_by_wwid_exact_match(self):
        self.io.add_by_id('scsi-' + WWID + '-part1', '/dev/sda')
        self.io.add_by_id('wwn-' + WWID, '/dev/sda')
        self.assertEqual((None, None), self.lfc.find_disk_by_wwid(WWID))

    @mock.patch.object(linuxfc, 'LOG')
    def test_find_disk_by_wwid_broken_link(self, mock_log):
        self.io.add_dir('/dev/disk/by-id', 'scsi-' + WWID)
        self.io.links['/dev/disk/by-id/scsi-' + WWID] = '/dev/sdz'
        self.assertEqual((None, None), self.lfc.find_disk_by_wwid(WWID))
        self.assertEqual(1, mock_log.error.call_count)
        self.assertFalse(self.io.listed('/sys/block/'))

    @mock.patch.object(linuxfc, 'LOG')
    def test_find_disk_by_wwid_multipath_error(self, mock_log):
        self.io.add_by_id('scsi-' + WWID, '/dev/sda')
        self.io.fail('list_dir', '/sys/block')
        self.assertEqual(('/dev/sda', None),
                         self.lfc.find_disk_by_wwid(WWID))
        self.assertEqual(1, mock_log.warning.call_count)

    @mock.patch.object(linuxfc, 'LOG')
    def test_find_disk_by_wwid_not_found(self, mock_log):
        self.io.add_dir('/dev/disk/by-id')
        self.assertEqual((None, None), self.lfc.find_disk_by_wwid(WWID))
        mock_log.error.assert_called_once_with(
            'Failed to find a disk at %s', '/dev/disk/by-id/scsi-' + WWID)

    def test_find_disk_by_wwid_no_by_id(self):
        self.assertEqual((None, None), self.lfc.find_disk_by_wwid(WWID))

    def test_resolve_disk_invalid(self):
        self.io.files.add('/dev/mapper/mpatha')
        self.assertRaises(exception.InvalidDevicePath,
                          self.lfc._resolve_disk, '/dev/mapper/mpatha')
