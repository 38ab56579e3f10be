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

"""Attach, detach and rescan Fibre Channel volumes on this host."""

import argparse
import sys

from oslo_config import cfg
from oslo_log import log as logging

from fc_brick import exception
from fc_brick.initiator.connectors import fibre_channel
from fc_brick.initiator import linuxscsi

CONF = cfg.CONF
LOG = logging.getLogger(__name__)

logging.register_options(CONF)

parser = argparse.ArgumentParser(prog="fc-brick")
parser.add_argument("--debug", action="store_true",
                    help="Enable debug logging")
parser.add_argument("--config-file", action="append", default=[],
                    help="Configuration file, may be given multiple times")

subparsers = parser.add_subparsers(dest="command", metavar="command")
subparsers.required = True

attach_parser = subparsers.add_parser(
    "attach", help="Find the device of a Fibre Channel volume")
ids = attach_parser.add_mutually_exclusive_group(required=True)
ids.add_argument("--wwn", action="append", dest="wwns",
                 help="Target World Wide Name, may be given multiple times")
ids.add_argument("--wwid", action="append", dest="wwids",
                 help="Volume World Wide Identifier, may be given multiple "
                      "times")
attach_parser.add_argument("--lun", default="0",
                           help="LUN of the volume on the targets")
attach_parser.add_argument("--volume-name", default=None)

detach_parser = subparsers.add_parser(
    "detach", help="Remove a device and all its paths from the host")
detach_parser.add_argument("device_path")

subparsers.add_parser("rescan", help="Rescan all SCSI hosts")


def _attach(args):
    connector = fibre_channel.FibreChannelConnector()
    props = {'volume_name': args.volume_name,
             'target_wwns': args.wwns or [],
             'target_lun': args.lun,
             'wwids': args.wwids or []}
    device_info = connector.connect_volume(props)
    print(device_info['path'])


def _detach(args):
    connector = fibre_channel.FibreChannelConnector()
    connector.disconnect_volume(args.device_path)


def _rescan(args):
    result = linuxscsi.LinuxSCSI().rescan_hosts()
    print("attempted: %(attempted)s failed: %(failed)s" % result._asdict())


COMMANDS = {'attach': _attach, 'detach': _detach, 'rescan': _rescan}


def main(argv=None):
    args = parser.parse_args(argv)

    CONF([], project='fc-brick', default_config_files=args.config_file)
    if args.debug:
        CONF.set_override('debug', True)
    logging.setup(CONF, 'fc-brick')

    try:
        COMMANDS[args.command](args)
    except exception.BrickException as exc:
        LOG.error("%(cmd)s failed: %(exc)s", {'cmd': args.command,
                                              'exc': exc})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
