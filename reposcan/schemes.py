"""Names of the bundled base24 color schemes."""

_NAMES = """
0x96f 3024-day 3024-night adventure-time alien-blood argonaut arthur
atelier-sulphurpool ayu-dark ayu-light ayu-mirage banana-blueberry batman
birds-of-paradise blazer blue-berry-pie blue-matrix bluloco-dark bluloco-light
borland breeze broadcast brogrammer builtin-dark builtin-light builtin-pastel-dark
builtin-solarized-dark builtin-solarized-light builtin-tango-dark builtin-tango-light
catppuccin-frappe catppuccin-latte catppuccin-macchiato catppuccin-mocha chalk
chalkboard challenger-deep ciapre clrs cobalt-neon cobalt2 crayon-pony-fish
cyberdyne dark-plus deep-oceanic-next deep desert dimmed-monokai dracula earthsong
elemental elementary embarcadero encom espresso-libre espresso fideloper
firefox-dev fish-tank flat flatland floraverse forest-blue framer front-end-delight
fun-forrest galaxy github-dark github grape gruvbox-dark gruvbox-light hacktober
hardcore highway hipster-green hivacruz homebrew hopscotch hurtado hybrid
ic-green-ppl ic-orange-ppl idea idle-toes jackie-brown japanesque jellybeans
jet-brains-darcula kibble lab-fox laser later-this-evening lavandula lovelace
man-page material-dark material mathias medallion mission-brogue misterioso molokai
mona-lisa monokai-vivid mountain night-lion-v1 night-lion-v2 night-owlish-light
nocturnal-winter obsidian ocean oceanic-material ollie one-black one-dark
one-half-light one-light operator-mono-dark pandora paul-millr pencil-dark
pencil-light piatto-light pnevma pro-light pro purple-rain purplepeter rebecca
red-alert red-planet red-sands rippedcasts royal scarlet-protocol sea-shells
seafoam-pastel shades-of-purple shaman slate sleepy-hollow smyck soft-server
solarized-dark-higher-contrast solarized-dark-patched space-gray-eighties-dull
space-gray-eighties spacedust sparky spiderman square sundried tango-adapted
tango-half-adapted terminal-basic thayer-bright the-hulk tomorrow-night toy-chest
treehouse twilight ubuntu ultra-violet under-the-sea unikitty vibrant-ink
violet-dark violet-light warm-neon wez wild-cherry wombat wryan zenburn
"""

SCHEMES: tuple[str, ...] = tuple(_NAMES.split())

_SCHEME_SET = frozenset(SCHEMES)


def is_known_scheme(name: str) -> bool:
    """Whether name is exactly one of the bundled scheme names."""
    return name in _SCHEME_SET