#!/bin/env python3
import sys

from analyse_branch.cli import main

sys.exit(main())
