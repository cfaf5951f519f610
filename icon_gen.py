"""Generate the calendar icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(today: date | None = None, size: int = 64) -> Image.Image:
    """Return a square RGBA image: a blue calendar header over today's day number."""
    today = today or date.today()
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    band = size // 4
    draw.rectangle((0, 0, size - 1, band), fill=ACCENT)
    draw.rectangle((0, 0, size - 1, size - 1), outline=ACCENT)

    text = str(today.day)
    avail_h = size - band - 4

    # Find the largest font size that fits below the header band
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= size - 4 and th <= avail_h:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + (size - band - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
