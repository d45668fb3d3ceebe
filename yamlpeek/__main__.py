import sys

from yamlpeek.cli import main

sys.exit(main())
