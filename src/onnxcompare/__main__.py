import sys

from onnxcompare.cli import main

sys.exit(main())
