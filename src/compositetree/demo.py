"""
Scripted demonstration of the composite tree.

Builds a single leaf and a two-level tree, renders both through the client,
then extends the tree without checking concrete classes.
"""

from compositetree.client import Client
from compositetree.core import Composite, Leaf


def build_sample_tree() -> Composite:
    """Build Branch(Branch(Leaf+Leaf)+Branch(Leaf))."""
    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)
    return tree


def run_demo(client: Client | None = None) -> tuple[str, str, str]:
    """
    Run the demonstration flow.

    Params:
        client: Client used for rendering; its output receives narration too

    Returns:
        Results for the simple leaf, the sample tree, and the extended tree
    """
    client = client or Client()
    say = client.output

    leaf = Leaf()
    say("Cliente: Obtengo un componente simple:")
    simple = client.code_client_simple(leaf)

    tree = build_sample_tree()
    say("Cliente: Ahora tengo un arbol compuesto:")
    composed = client.code_client_simple(tree)

    say("Cliente: No necesito verificar las clases de componentes incluso cuando administro el arbol:")
    managed = client.code_client_managing(tree, leaf)

    return simple, composed, managed
