"""
Example echo program: "orca says".

    $ python main.py
    Orca says: hello sea world!
    $ python main.py -p="Seal says: " fish "more fish"
    Seal says: fish
    Second orca says: more fish
"""
import sys

from rich.console import Console

from orca import *

console = Console(highlight=False, soft_wrap=True)
errors = Console(stderr=True, highlight=False, soft_wrap=True)


def main(argv):
    parser = Parser(argv, [
        flag("-h", "--help", name="help", descr="print this help page"),
        option("-p", "--prefix", name="prefix", descr="prefix to a message", default="Orca says: "),
    ], ["hello sea world!"])

    if error := parser.last_error():
        errors.print("orca encountered an error during initialization: %d" % error, markup=False)
        return 1

    if parser.is_set("-h"):
        console.print(parser.render_help(["message", "2nd_message"]), markup=False, end="")
        return 0

    console.print(parser.value("-p") + parser.argument(), markup=False)

    if second := parser.argument(1):
        console.print("Second orca says: " + second, markup=False)

    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
