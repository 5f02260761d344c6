import fire  # noqa

from coders.huffman import Huffman
from coders.render import format_code_table, render_tree
from coders.stats import BITS_PER_SYMBOL, compression_stats

DEFAULT_TEXT = (
    "Come Nerevar, friend or traitor, come. Come and look upon the Heart and "
    "Akulakahn, and bring Wraithguard, I have need of it. Come to the Heart "
    "chamber, I wait for you there, where we last met, countless ages ago. "
    "Come to me through fire and war, I welcome you! Welcome Moon-and-Star, "
    "I have prepared a place for you! Come, bring Wraithguard to the Heart "
    "chamber, together, let us free the cursed false gods! Welcome Nerevar, "
    "together we shall speak for the law and the land and drive the mongrel "
    "dogs of the Empire from Morrowind! Is this how you honor the 6th house "
    "and the tribe unmourned? Come to me openly, and not by stealth. Dagoth "
    "Ur welcomes you Nerevar, my old friend... but to this place where "
    "destiny is made, why have you come unprepared? Welcome, Moon-and-Star, "
    "to this place where YOUR destiny is made. What a fool you are, I'm a "
    "god! How can you kill a god? What a grand and intoxicating innocence! "
    "How could you be so naive? There is no escape, no recall or "
    "intervention can work in this place! Come! Lay down your weapons! It is "
    "not too late for my mercy..."
)


def main(in_file: str | None = None, encoding: str = "utf-8",
         show_tree: bool = True, show_encoded: bool = True,
         progress: bool = False):
    if in_file is None:
        text = DEFAULT_TEXT
    else:
        with open(in_file, "r", encoding=encoding) as f:
            text = f.read()

    comp = Huffman()
    encoded: str = comp.encode(text, progress=progress)["data"]

    print("Huffman Codes:")
    for line in format_code_table(comp.codes):
        print(line)

    if show_tree:
        print("\nHuffman Tree:")
        for line in render_tree(comp.root):
            print(line)

    if show_encoded:
        print("Original text:")
        print(text)
        print("Compressed text:")
        print(encoded)

    st = compression_stats(text, encoded, comp.freqs)
    print("\nAlphabet size:", len(comp.A))
    print("Original text size (in bits):", st.original_bits)
    print("Compressed text size (in bits):", st.encoded_bits)
    print(f"Original text bits per character: {BITS_PER_SYMBOL}")
    if st.symbols > 0:
        print(f"Compressed text bits per character: {st.bits_per_symbol:.4f}")
        print(f"Entropy: {st.entropy:.4f} bits per character")
        print(f"Compression ratio: {st.ratio:.4f}")
    else:
        print("Empty input: nothing to compress")


if __name__ == "__main__":
    fire.Fire(main)
