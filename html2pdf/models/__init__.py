from html2pdf.models.margin import Margin
from html2pdf.models.paper import PaperSize
from html2pdf.models.print_options import PrintOptions

__all__ = ["Margin", "PaperSize", "PrintOptions"]
