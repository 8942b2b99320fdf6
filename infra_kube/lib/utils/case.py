def kebab_from_snake(v: str) -> str:
    """Convert string from snake to kebab case

    :param v: String in snake case
    :return: String in kebab case
    """
    return "-".join(v.split("_"))


def camel_from_snake(v: str) -> str:
    """Convert string from snake to lower camel case

    ``node_selector`` becomes ``nodeSelector``. Acronyms are not detected, ``host_ip`` becomes ``hostIp``.

    :param v: String in snake case
    :return: String in camel case
    """
    head, *tail = v.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)
