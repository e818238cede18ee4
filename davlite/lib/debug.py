from lxml import etree


def xmlstring(root):
    if isinstance(root, str):
        return root
    return etree.tostring(root, pretty_print=True).decode("utf-8")
