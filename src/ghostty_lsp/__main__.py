from ghostty_lsp.cli.lsp import lsp

if __name__ == "__main__":
    lsp()
