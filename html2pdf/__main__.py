from html2pdf.cli import main

main()
