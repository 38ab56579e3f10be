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
from fc_brick.tests import base


class BrickExceptionTestCase(base.TestCase):

    def test_default_message(self):
        exc = exception.BrickException()
        self.assertEqual('An unknown exception occurred.', str(exc))
        self.assertEqual(500, exc.kwargs['code'])

    def test_message_kwargs(self):
        exc = exception.InvalidDevicePath(path='/dev/mapper/mpatha')
        self.assertEqual('Illegal path for device /dev/mapper/mpatha.',
                         exc.msg)
        self.assertEqual(400, exc.kwargs['code'])

    def test_explicit_message(self):
        exc = exception.InvalidParameterValue('bad lun')
        self.assertEqual('bad lun', str(exc))

    @mock.patch.object(exception, 'LOG')
    def test_missing_kwargs(self, mock_log):
        exc = exception.SysfsIOError(path='/sys/block')
        self.assertEqual(exception.SysfsIOError.message, exc.msg)
        mock_log.exception.assert_called_once()

    def test_device_removal_failed(self):
        exc = exception.DeviceRemovalFailed(device='/dev/sdb',
                                            reason='I/O error')
        self.assertEqual('/dev/sdb', exc.device)
        self.assertIn('/dev/sdb', str(exc))
        self.assertIn('I/O error', str(exc))

    def test_not_found_hierarchy(self):
        self.assertTrue(issubclass(exception.NoFibreChannelVolumeDeviceFound,
                                   exception.NotFound))
        self.assertTrue(issubclass(exception.InvalidDevicePath,
                                   exception.Invalid))
