import sys

from dashcharts.cli import main

sys.exit(main())
