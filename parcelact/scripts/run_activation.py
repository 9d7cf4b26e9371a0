#!/usr/bin/env python
"""
CLI interface to run a parcel model simulation and report droplet activation.

"""
import os
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

import parcelact as pa
from parcelact.util import ParcelActError

parser = ArgumentParser(description=__doc__, formatter_class=RawDescriptionHelpFormatter)
parser.add_argument(
    "namelist",
    type=str,
    metavar="config.yml",
    help="YAML namelist controlling simulation configuration",
)
parser.add_argument(
    "-q",
    "--quiet",
    action="store_true",
    help="Don't print the parcel model's own progress output",
)


def run_activation(argv=None):
    # Read command-line arguments
    args = parser.parse_args(argv)

    try:
        print("Attempting to read simulation namelist {}".format(args.namelist))
        modes, initial, control = pa.read_namelist(args.namelist)

        print("Beginning simulation")
        result = pa.run(modes, initial, console=not args.quiet)

        print(result)
        print(result.mode_summary().to_string())

        # Make output directory if it doesn't exist
        if not os.path.exists(control["output_dir"]):
            os.makedirs(control["output_dir"])

        out_file = os.path.join(control["output_dir"], control["name"])
        out_file += "." + control["format"]
        print("Trying to save output to {}".format(out_file))
        pa.write_result(out_file, result)
    except ParcelActError as e:
        print("Something went wrong: {}".format(e))
        return 1

    # Successful completion
    print("Done!")
    return 0


def main():
    sys.exit(run_activation())


if __name__ == "__main__":
    main()
