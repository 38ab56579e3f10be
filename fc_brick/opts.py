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


_opts = [
    cfg.BoolOpt('rescan_on_miss',
                default=True,
                help='Rescan all SCSI hosts once when the first search for a '
                     'Fibre Channel volume does not find a multipath device, '
                     'then search again. The rescan is never performed more '
                     'than once per attach. Default value is True.'),
    cfg.BoolOpt('use_privsep',
                default=True,
                help='Write to sysfs control files (SCSI host scan, device '
                     'delete) through the privsep daemon. Disable it when the '
                     'calling process already runs as root. Default value is '
                     'True.'),
]

cfg.CONF.register_opts(_opts, group='fc_brick')


def list_opts():
    """oslo.config.opts entrypoint for sample config generation."""
    return [('fc_brick', _opts)]
