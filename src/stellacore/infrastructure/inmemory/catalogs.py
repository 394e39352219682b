"""Static seed content for the universe: sectors, resources, enemies, ships, recipes and the main quest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from stellacore.domain.models.quest import (
    ActivateStep,
    CraftStep,
    DefeatStep,
    GatherStep,
    Quest,
    QuestReward,
)
from stellacore.domain.models.recipe import Recipe
from stellacore.domain.models.region import DropEntry, EnemyTemplate, Region, ResourceSpec
from stellacore.domain.models.starship import MODULE_SLOT_LABELS


@dataclass(frozen=True)
class ResourceEntry:
    name: str
    spec: ResourceSpec


@dataclass(frozen=True)
class EnemyEntry:
    name: str
    template: EnemyTemplate


@dataclass(frozen=True)
class ModuleTemplate:
    name: str
    speed_bonus: int = 0
    cargo_bonus: int = 0
    defense_bonus: int = 0
    summary: str = ""


@dataclass(frozen=True)
class UniverseCatalog:
    sector_prefixes: Tuple[str, ...]
    sector_suffixes: Tuple[str, ...]
    roman_numerals: Tuple[str, ...]
    region_descriptors: Tuple[str, ...]
    resources: Tuple[ResourceEntry, ...]
    enemies: Tuple[EnemyEntry, ...]
    sanctuary_names: Tuple[str, ...]
    ship_prefixes: Tuple[str, ...] = ()
    ship_codenames: Tuple[str, ...] = ()
    ship_classes: Tuple[str, ...] = ()
    ship_roles: Tuple[str, ...] = ()
    ship_summaries: Tuple[str, ...] = ()
    module_pools: Dict[str, Tuple[ModuleTemplate, ...]] = field(default_factory=dict)
    slot_labels: Dict[str, str] = field(default_factory=lambda: dict(MODULE_SLOT_LABELS))


SECTOR_PREFIXES = ("Iris", "Zenith", "Helios", "Nyx", "Atlas", "Vesper")
SECTOR_SUFFIXES = ("Spire", "Reach", "Expanse", "Cleft", "Drift", "Crown")
ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII")

REGION_DESCRIPTORS = (
    "Un anneau orbital saturé de reliques et d'éclairs violets.",
    "Une ceinture d'épaves titanesques illuminée par des vents solaires.",
    "Un corridor d'astéroïdes fractals parcouru d'ondes gravitationnelles.",
    "Une sphère de brume irisée où chantent des balises fantômes.",
    "Un amas de cristaux géants alimentant un océan de données stellaires.",
    "Un désert magnétique balayé par des comètes artificielles.",
)

RESOURCE_CATALOG = (
    ResourceEntry("Cœur de Pulsar", ResourceSpec(1, 2, 22, "Noyau vibrant qui amplifie les propulseurs stellaires.")),
    ResourceEntry("Amas de Flux Radial", ResourceSpec(1, 3, 18, "Particules qui fluidifient les matrices énergétiques.")),
    ResourceEntry("Silice Photomorphe", ResourceSpec(1, 2, 20, "Matériau adaptatif pour les coques holographiques.")),
    ResourceEntry("Carburant Chimérique", ResourceSpec(1, 1, 26, "Essence rare pour les sauts d'urgence.")),
    ResourceEntry("Spore de Néon", ResourceSpec(2, 3, 16, "Organisme symbiotique qui répare les drones.")),
)

ENEMY_CATALOG = (
    EnemyEntry(
        "Sentinelle Cryostella",
        EnemyTemplate(
            health=55,
            power=13,
            xp=55,
            summary="Drone antique qui gèle tout intrus.",
            drops={"Carapace Suprafréquence": DropEntry(chance=0.45, amount=1)},
        ),
    ),
    EnemyEntry(
        "Avatar Plasma",
        EnemyTemplate(
            health=48,
            power=15,
            xp=60,
            summary="Nuage énergétique prenant forme hostile.",
            drops={"Condensat Solaire": DropEntry(chance=0.5, amount=1)},
        ),
    ),
    EnemyEntry(
        "Hydre Magnétrique",
        EnemyTemplate(
            health=65,
            power=16,
            xp=70,
            summary="Essaim de câbles vivants animés par le champ magnétique.",
            drops={"Bobine Entrelacée": DropEntry(chance=0.35, amount=1)},
        ),
    ),
)

SANCTUARY_NAMES = ("Ancrage de Phase", "Chœur Luminique", "Tour de Concordance", "Prisme Harmonia")

SHIP_PREFIXES = ("VX", "OR", "LY", "AX", "HL", "CR")
SHIP_CODENAMES = ("Aegis", "Solstice", "Vega", "Mirage", "Aurora", "Zenith")
SHIP_ROLES = ("Éclaireur de flux", "Corvette d'escorte", "Frégate de soutien", "Sloop de recherche")
SHIP_CLASSES = ("Classe Cygnus", "Classe Helion", "Classe Atalante", "Classe Spectra")
SHIP_SUMMARIES = (
    "Châssis agile conçu pour les manoeuvres rapides dans les brouillards plasma.",
    "Plateforme modulable privilégiée par les cartographes stellaires.",
    "Structure robuste dotée de baies interchangeables.",
    "Prototype expérimental équilibrant défense et cargo.",
)

SHIP_MODULE_POOLS: Dict[str, Tuple[ModuleTemplate, ...]] = {
    "propulsion": (
        ModuleTemplate("Moteur Ionique Polaris", speed_bonus=4, summary="Concentre le flux pour accélérer les dérives."),
        ModuleTemplate(
            "Voile Solaire Prismique",
            speed_bonus=3,
            cargo_bonus=5,
            summary="Déploie des voiles semi-rigides amplifiant la poussée.",
        ),
        ModuleTemplate(
            "Propulseur Gravimétrique",
            speed_bonus=5,
            summary="Amplifie les puits gravitationnels pour des bonds rapides.",
        ),
    ),
    "hull": (
        ModuleTemplate(
            "Carlingue en Nacre Quantique",
            defense_bonus=6,
            summary="Diffuse les impacts via des facettes holographiques.",
        ),
        ModuleTemplate(
            "Coque Polyphase",
            defense_bonus=4,
            cargo_bonus=8,
            summary="Compartimente l'intérieur pour accueillir plus de modules.",
        ),
        ModuleTemplate(
            "Armature Lithoplasma",
            defense_bonus=8,
            summary="Renforce la structure contre les torsions subspatiales.",
        ),
    ),
    "utility": (
        ModuleTemplate("Baie de Drones Auroraux", cargo_bonus=10, summary="Déploie des drones pour récolter en autonomie."),
        ModuleTemplate(
            "Matrix d'Analyse Lumen",
            speed_bonus=1,
            summary="Optimise les trajectoires grâce à des calculs prédictifs.",
        ),
        ModuleTemplate(
            "Node Médical Æther",
            defense_bonus=3,
            summary="Renforce les boucliers en recyclant l'énergie résiduelle.",
        ),
    ),
}


def default_universe_catalog() -> UniverseCatalog:
    return UniverseCatalog(
        sector_prefixes=SECTOR_PREFIXES,
        sector_suffixes=SECTOR_SUFFIXES,
        roman_numerals=ROMAN_NUMERALS,
        region_descriptors=REGION_DESCRIPTORS,
        resources=RESOURCE_CATALOG,
        enemies=ENEMY_CATALOG,
        sanctuary_names=SANCTUARY_NAMES,
        ship_prefixes=SHIP_PREFIXES,
        ship_codenames=SHIP_CODENAMES,
        ship_classes=SHIP_CLASSES,
        ship_roles=SHIP_ROLES,
        ship_summaries=SHIP_SUMMARIES,
        module_pools=dict(SHIP_MODULE_POOLS),
    )


NEBULA_REGION = "Nébuleuse des Voiles"
RELIQUARY_REGION = "Station Reliquaire"


def seed_regions() -> Dict[str, Region]:
    return {
        NEBULA_REGION: Region(
            description="Un champ d'astéroïdes luminescents baigné d'échos cristallins.",
            resources={
                "Prisme d'Astéroïde": ResourceSpec(1, 2, 20, "Fragments capables d'alimenter les relais stellaires."),
                "Poussière Ionique Lunaire": ResourceSpec(1, 1, 12, "Résidu ionisé utilisé pour l'entrelacement énergétique."),
            },
            sanctuaries=("Relais Stellacristal",),
        ),
        RELIQUARY_REGION: Region(
            description="Une station dérivante noyée dans la brume cosmique et les souvenirs numériques.",
            resources={
                "Lichen Quantique": ResourceSpec(1, 2, 16, "Bioluminescence qui stabilise les circuits psioniques."),
            },
            enemies={
                "Spectre du Vide": EnemyTemplate(
                    health=60,
                    power=14,
                    xp=65,
                    summary="Gardien spectral lié au relais oublié.",
                    drops={
                        "Essence Photonique": DropEntry(chance=1.0, amount=1),
                        "Fragment de Mémoire Astrale": DropEntry(chance=0.4, amount=1),
                    },
                ),
            },
        ),
    }


def default_recipes() -> Dict[str, Recipe]:
    return {
        "Balise Stellaris": Recipe(
            name="Balise Stellaris",
            requires={"Prisme d'Astéroïde": 2, "Essence Photonique": 1},
            xp=45,
            description="Une balise holographique capable d'activer les relais stellaires.",
        ),
    }


def stellacore_quest() -> Quest:
    return Quest(
        id="reactivation_stellacore",
        name="Réactivation Stellacristal",
        description="Réallumer le réseau de relais stellaires pour dissiper la brume cosmique.",
        steps=(
            GatherStep(
                resource="Prisme d'Astéroïde",
                amount=2,
                summary="Récolter deux Prismes d'Astéroïde dans la Nébuleuse des Voiles.",
                success_message="Les prismes vibrent en phase avec vos gants quantiques.",
            ),
            DefeatStep(
                enemy="Spectre du Vide",
                summary="Terrasser le Spectre du Vide qui garde la Station Reliquaire.",
                success_message="Le spectre se dissipe en laissant une Essence Photonique.",
            ),
            CraftStep(
                item="Balise Stellaris",
                summary="Assembler la Balise Stellaris grâce aux ressources réunies.",
                success_message="La balise pulse d'une énergie pure.",
            ),
            ActivateStep(
                sanctuary="Relais Stellacristal",
                summary="Activer le Relais Stellacristal et rétablir sa lumière.",
                success_message="Le relais irradie, dissipant la brume qui enveloppait la nébuleuse.",
            ),
        ),
        rewards=QuestReward(xp=120, items=("Clé de Saut Stellaire",)),
    )
