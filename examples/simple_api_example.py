#!/usr/bin/env python3
"""
Example of headers, footers and a lazy page counter.

Lays out a few pages and prints where each line of text was placed.
"""

from quill_layout import Document


def main():
    """Lay out three pages and dump the placement records."""

    doc = Document(page_size="letter", margins=72, skip_page_creation=True)

    # 1. Header drawn on every new page
    doc.header(
        doc.margin_box.top_left,
        lambda: doc.text("Quarterly report", size=16, align="center"),
        {"height": 30},
    )

    # 2. Footer anchored 20pt above the bottom margin
    doc.footer((0, 20), lambda: doc.text("Confidential", size=8), {"height": 20})

    # 3. Page counter drawn only when asked for
    counter = doc.lazy_region(
        (doc.bounds.right - 50, doc.bounds.bottom + 25),
        lambda: doc.text(f"Page {doc.page_count}", size=8),
        {"width": 50, "height": 25},
    )

    for _ in range(3):
        doc.start_new_page()
        doc.move_down(40)
        doc.padded_region(12, lambda: doc.text("Body text inside a padded region"))
        counter.activate()

    for page in doc.pages:
        print(f"Page {page.page_number}")
        for item in page.get_content("text"):
            print(f"   ({item['x']:7.2f}, {item['y']:7.2f})  {item['text']}")


if __name__ == "__main__":
    main()
