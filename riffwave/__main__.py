import os
import logging
import argparse

from riffwave.reader import decode_wave
from riffwave.audio import get_mono_data, write_mono

DEFAULT_OUTPUT_FILE = 'mono.wav'


def main(argv=None):
    parser = argparse.ArgumentParser(prog='riffwave')
    parser.add_argument('-f', '--output-file', default=DEFAULT_OUTPUT_FILE,
                        dest='output_file', help="Filename for output mono audio file")
    parser.add_argument('-i', '--info', action='store_true', dest='info',
                        help="Print header information instead of converting")
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose',
                        help="Enable debug logging")
    parser.add_argument('filename')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")

    if not os.path.exists(args.filename):
        raise IOError("File '%s' does not exist" % args.filename)

    with open(args.filename, 'rb') as fh:
        wav = decode_wave(fh.read())

    if args.info:
        header = wav.header
        print("%s: %dHz, %d channel(s), %d bits, %d samples"
              % (args.filename, header.sample_rate, header.num_channels,
                 header.bits_per_sample, header.num_samples))
        return 0

    write_mono(args.output_file, get_mono_data(wav), wav.sample_rate)
    return 0


if __name__ == "__main__":
    main()
