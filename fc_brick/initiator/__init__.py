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
"""fc-brick's Initiator module.

The initator module contains the capabilities for discovering Fibre Channel
volumes on a host and for removing them from the SCSI subsystem.
"""

DEV_PATH = '/dev/'
DEV_DM_PREFIX = '/dev/dm-'
BY_PATH_DIR = '/dev/disk/by-path/'
BY_ID_DIR = '/dev/disk/by-id/'
SYS_BLOCK_DIR = '/sys/block/'
SCSI_HOST_DIR = '/sys/class/scsi_host/'

DM_PREFIX = 'dm-'
BY_ID_SCSI_PREFIX = 'scsi-'

# Wildcard channel, target and lun for /sys/class/scsi_host/hostN/scan
SCAN_ALL = '- - -'
DELETE_DEVICE = '1'
SYSFS_WRITE_MODE = 0o666
