import sys

from chord_chart import ChartView, segment

text = """C       G       Am      F
When I find myself in times of trouble
"""
lines = segment(text)

# Line and span types
for line in lines:
    sys.stdout.write(f"{line.type}: {[span.type for span in line.spans]}\n")

# Transpose up a whole step and back, one half step at a time
view = ChartView("example", text)
view.bump_transpose(1)
view.bump_transpose(1)
sys.stdout.write(view.render())
