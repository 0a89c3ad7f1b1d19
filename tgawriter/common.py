from PyQt5.QtCore import QSettings
import tgawriter.utils as ut

settings = QSettings("settings.ini", QSettings.IniFormat)

ext = '.tga'
header_size = 18

# Image types (header field 3)
image_types = {
    'NO_IMAGE': 0,
    'COLOR_MAPPED': 1,
    'TRUE_COLOR': 2,
    'BLACK_AND_WHITE': 3,
    'RLE_COLOR_MAPPED': 9,
    'RLE_TRUE_COLOR': 10,
    'RLE_BLACK_AND_WHITE': 11
}

# Pixel formats, in bits per pixel
pixel_formats = {
    'BW8': 8,
    'BGR15': 15,
    'BGR24': 24,
    'BGRA32': 32
}

default_blank_color = '0,0,0,255'
default_top_to_bottom = 'true'
default_output_path = '.'

def load_settings():
    """
    reads CLI defaults, writing missing keys back to settings.ini
    """
    blank_color = ut.getSettingsOrAddDefault(settings, "BlankColor", default_blank_color)
    top_to_bottom = ut.getSettingsOrAddDefault(settings, "TopToBottom", default_top_to_bottom)
    output_path = ut.getSettingsOrAddDefault(settings, "OutputPath", default_output_path)

    # QSettings hands back a list for comma separated ini values
    if isinstance(blank_color, (list, tuple)):
        blank_color = ','.join(str(elt) for elt in blank_color)
    if not isinstance(top_to_bottom, bool):
        top_to_bottom = str(top_to_bottom).strip().lower() in ('true', '1', 'yes')

    return {
        'blank_color': str(blank_color),
        'top_to_bottom': top_to_bottom,
        'output_path': str(output_path)
    }
