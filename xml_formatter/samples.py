"""Sample document offered to first-time users."""

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bookstore>
    <book id="1">
        <title>The Great Gatsby</title>
        <author>F. Scott Fitzgerald</author>
        <price currency="USD">12.99</price>
        <genre>Fiction</genre>
    </book>
    <book id="2">
        <title>To Kill a Mockingbird</title>
        <author>Harper Lee</author>
        <price currency="USD">13.99</price>
        <genre>Fiction</genre>
    </book>
</bookstore>"""


def load_sample() -> str:
    return SAMPLE_XML
