"""Basic usage examples for geoproj-lib."""

from geoproj_lib import georef
from geoproj_lib.info import display_info

# Encode a position at increasing precision
for prec in (-1, 0, 2, 3, 5):
    print(prec, georef.forward(57.64911, 10.40744, prec))

# Decode back to the cell center and to its south-west corner
print(georef.reverse("NKLN2438"))
print(georef.reverse("NKLN2438", centerp=False))

# Display library information with rich formatting
print("\nLibrary Information:")
display_info()
