import argparse

import numpy as np


def text_to_bin(infile_name: str, outfile_name: str) -> None:
    with open(infile_name, 'r') as infile:
        with open(outfile_name, 'wb') as outfile:
            for line in infile:
                for num in line.split():
                    outfile.write(int(num).to_bytes(length=4, byteorder='little'))


def bin_to_text(infile_name: str, outfile_name: str) -> None:
    nums = np.fromfile(infile_name, dtype='<i4')
    with open(outfile_name, 'w') as outfile:
        outfile.write(' '.join(str(n) for n in nums[:2]) + '\n')
        for record in nums[2:].reshape(-1, 3):
            outfile.write(' '.join(str(n) for n in record) + '\n')


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('-r', '--reverse', action='store_true',
                        help='convert binary input back to text')

    args = parser.parse_args(argv)

    if args.reverse:
        bin_to_text(args.infile, args.outfile)
    else:
        text_to_bin(args.infile, args.outfile)


if __name__ == '__main__':
    main()
