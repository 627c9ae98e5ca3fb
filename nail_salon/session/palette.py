from nail_salon.session.contracts import RgbColor

# Block picker swatches, in display order
PALETTE: list[tuple[str, RgbColor]] = [
    ("red",          RgbColor.from_hex("#F44336")),
    ("pink",         RgbColor.from_hex("#E91E63")),
    ("purple",       RgbColor.from_hex("#9C27B0")),
    ("deep_purple",  RgbColor.from_hex("#673AB7")),
    ("indigo",       RgbColor.from_hex("#3F51B5")),
    ("blue",         RgbColor.from_hex("#2196F3")),
    ("light_blue",   RgbColor.from_hex("#03A9F4")),
    ("cyan",         RgbColor.from_hex("#00BCD4")),
    ("teal",         RgbColor.from_hex("#009688")),
    ("green",        RgbColor.from_hex("#4CAF50")),
    ("light_green",  RgbColor.from_hex("#8BC34A")),
    ("lime",         RgbColor.from_hex("#CDDC39")),
    ("yellow",       RgbColor.from_hex("#FFEB3B")),
    ("amber",        RgbColor.from_hex("#FFC107")),
    ("orange",       RgbColor.from_hex("#FF9800")),
    ("deep_orange",  RgbColor.from_hex("#FF5722")),
    ("brown",        RgbColor.from_hex("#795548")),
    ("grey",         RgbColor.from_hex("#9E9E9E")),
    ("blue_grey",    RgbColor.from_hex("#607D8B")),
    ("black",        RgbColor.from_hex("#000000")),
]

# UI strings shown in notifications
MSG_PERMISSION = "Camera permission denied. Please allow camera access."
MSG_SERVER_ERROR = "Image upload failed. Server error."
MSG_TRANSPORT_ERROR = "Error occurred while uploading image: {detail}"
