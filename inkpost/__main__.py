# inkpost/__main__.py

from inkpost.cli import main

main()
