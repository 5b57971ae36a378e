from __future__ import annotations

import random
from typing import Any, Optional, Tuple


QUOTES: Tuple[str, ...] = (
    "Drink water.",
    "Slow down!",
    "Take a breather.",
    "Be nice to venue staff.",
    "Rithwik 2024",
    "Ask your local William Teskey about United States Presidents!",
    "Purdy is watching.",
    "Nerd.",
    "It is always funny to mess with Evan.",
    ":)",
    "I couldnt think of any more quotes",
    "No, I will not be telling you every quote I put in here.",
    "Are you cooked or are you cooking?",
    "Remind Aahil to do his webwork",
    "Remind Ethan to do his webwork",
    "Drew Cole 秃头书呆子",
    "Should you be looking at this, or doing strategy?",
    "Be like Usain Bolt wearing heelys.",
    "Did you lose the plot, or could it just not keep up with you?",
    "Monster energy is not a substitute for sleeping.",
    "Getting a buzzcut is a good life choice.",
    "Lock in.",
    "Use the :toocool: emote on slack more.",
    "Peace and Love.",
    "What year was the Year Without a Summer?",
    "What year did the second bank of the United States obtain its charter?",
    "Ryan McGoff",
    "Deodorant is a good choice to make.",
    "The Sun is Sunny.",
    "Compartmentalization is healthy if you don't think about it.",
    "At least you're not in the Duluth stands. Unless you are in which case tough I guess?",
    "Go Knicks!",
    "876 💙",
    "18! 16!",
    "Woolsey is wrong the halo show sucks",
    "Check out the newest project from Tag and Micheal: Currently unnamed study tool!",
    "Rithwik Barbados Barber",
    "Naz Reid.",
)


def random_quote(refresh_token: Any = None, rng: Optional[random.Random] = None) -> str:
    """Return one quote picked uniformly from ``QUOTES``.

    ``refresh_token`` is ignored. Binding it to a frequently edited range
    (e.g. ``RawData!B2:B``) makes the sheet recalculate the cell.
    """
    chooser = rng or random
    return QUOTES[chooser.randrange(len(QUOTES))]
