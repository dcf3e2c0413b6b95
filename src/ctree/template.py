"""The tree picture and the tokens embedded in it.

Placeholder tokens are replaced by option glyphs. A marker letter in front of a
glyph selects its color: ``y`` yellow, ``g`` green, ``b`` brown. Digit runs mark
light positions. The logo on the right carries no tokens or markers and is left
as is.
"""

# star option key -> template token
STAR_TOKENS = {
    "TOP": "TOP",
    "TREE_STAR": "CROWN",
    "LEFT": "LEFT",
    "RIGHT": "RIGHT",
    "BOTTOM": "BOTTOM",
}
BALL_TOKEN = "BALL"
STAR_FILL_TOKEN = "STAR"

YELLOW_PREFIX = "y"
GREEN_PREFIX = "g"
BROWN_PREFIX = "b"

GREEN_GLYPHS = ("/", "\\", "=")
BROWN_GLYPHS = ("|", "_")

TREE_TEMPLATE = r"""
         yTOP
        yLEFTyCROWNyRIGHT
         yBOTTOM
        g/g=g\               /\  /\    ___  _ __  _ __ __    __
      10g/ ySTAR g\20            /  \/  \  / _ \| '__|| '__|\ \  / /
      g/g=g=g=g=g=g\           / /\  /\ \|  __/| |   | |    \ \/ /
      g/  3BALL  g\          \_\ \/ /_/ \___/|_|   |_|     \  /
    40g/ 50 ySTAR 60 g\70                                       / /
    g/g=g=g=g=g=g=g=g=g=g\        __  __                        /_/    _
    g/  ySTAR   ySTAR  g\        \ \/ /        /\  /\    ____  ____  | |
  80g/ ySTAR   90   ySTAR g\100       \  /   __   /  \/  \  / _  |/ ___\ |_|
  g/g=g=g=g=g=g=g=g=g=g=g=g=g=g\       /  \  |__| / /\  /\ \| (_| |\___ \  _
  g/  140   ySTAR   150  g\      /_/\_\      \_\ \/ /_/ \__,_|\____/ |_|
160g/ ySTAR   170   180   ySTAR g\190
g/g=g=g=g=g=g=g=g=g=g=g=g=g=g=g=g=g=g\
       b|   b|
       b|b_b_b_b|
"""
