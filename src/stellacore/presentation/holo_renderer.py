import random
from typing import Iterable, Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from stellacore.application.dtos import CombatResult, ShipMovementReport
from stellacore.application.services.quest_service import QuestService
from stellacore.domain.models.actor import Actor
from stellacore.domain.models.region import Region
from stellacore.domain.models.starship import Starship


_STARS = ("*", ".", "+", "o")
_NEBULA_NAMES = ("Orion", "Lyra", "Draco", "Arcturus", "Andromède")
_VESSEL_PREFIXES = ("NX", "SSV", "Aegis", "Nova")

_BORDER_HERO = "yellow"
_BORDER_SECTOR = "cyan"
_BORDER_HANGAR = "green"
_BORDER_NAVIGATION = "bright_blue"
_BORDER_COMBAT = "red"
_BORDER_LAB = "magenta"
_BORDER_RELAY = "bright_magenta"


def summarize_category(category: Mapping[str, int]) -> str:
    entries = sorted(f"{name} ×{amount}" for name, amount in category.items())
    return ", ".join(entries) if entries else "(vide)"


class HoloRenderer:
    """Console projections of the simulation state, drawn with rich panels."""

    def __init__(self, console: Optional[Console] = None, rng: Optional[random.Random] = None) -> None:
        self.console = console or Console()
        self.rng = rng or random.Random()

    def starfield(self, width: int) -> str:
        return "".join(self.rng.choice(_STARS) for _ in range(width))

    def header(self, title: str) -> None:
        self.console.rule(f"[bold yellow]{escape(title)}[/bold yellow]")

    def frame_lines(self, title: str, lines: Iterable[str], border_style: str = "yellow") -> None:
        body = "\n".join(escape(line) for line in lines)
        self.console.print(
            Panel.fit(
                body,
                title=f"[bold yellow]{escape(title)}[/bold yellow]",
                border_style=border_style,
            )
        )

    def _stars(self, width: int) -> None:
        self.console.print(escape(self.starfield(width)), style="dim")

    def render_hero(self, actor: Actor) -> None:
        call_sign = f"{self.rng.choice(_VESSEL_PREFIXES)}-{actor.level:03d}"
        stats = actor.stats
        lines = [
            f"Appel : {call_sign}",
            f"Classe : {actor.archetype}",
            f"Bio : {actor.description}",
            f"PV : {stats.health} / {stats.max_health}",
            f"PM : {stats.mana} / {stats.max_mana}",
        ]
        self.header("Projection holo-personnage")
        self._stars(36)
        self.frame_lines("Profil du capitaine", lines, _BORDER_HERO)
        self._stars(36)

    def render_region(self, region_name: str, region: Region) -> None:
        nebula = self.rng.choice(_NEBULA_NAMES)
        resource_lines = sorted(f"{name} : {spec.summary}" for name, spec in region.resources.items())
        enemy_lines = sorted(f"{name} : {template.summary}" for name, template in region.enemies.items())

        lines = [
            f"Secteur : {region_name}",
            f"Nébuleuse : {nebula}",
            f"Description : {region.description}",
            "-- Ressources --",
            *(resource_lines or ["Aucune ressource détectée"]),
            "-- Signatures ennemies --",
            *(enemy_lines or ["Menace minimale"]),
        ]
        if region.sanctuaries:
            lines.append("-- Relais --")
            lines.extend(region.sanctuaries)

        self.header("Balayage du secteur")
        self._stars(40)
        self.frame_lines("Analyse sectorielle", lines, _BORDER_SECTOR)

    def render_starship(self, ship: Starship) -> None:
        stats = ship.stats
        lines = [
            f"Indicatif : {ship.call_sign}",
            f"Nom de code : {ship.codename}",
            f"Classe : {ship.ship_class}",
            f"Rôle : {ship.role}",
            f"Localisation : {ship.location or 'Inconnue'}",
            f"Stats → Vitesse {stats.speed} | Cargo {stats.cargo} | Défense {stats.defense}",
            "-- Modules --",
            *ship.module_summaries(),
        ]
        self.header("Hangar orbital")
        self.frame_lines("Fiche vaisseau", lines, _BORDER_HANGAR)
        self._stars(36)

    def render_ship_movement(self, ship: Starship, report: ShipMovementReport) -> None:
        lines = [
            f"Vaisseau : {ship.call_sign} ({ship.codename})",
            f"Origine : {report.origin or 'Inconnue'}",
            f"Destination : {report.destination or '-'}",
            f"Distance : {report.distance} unités",
            f"Durée : {report.travel_time} cycles",
            f"Vitesse actuelle : {ship.stats.speed}",
            "Trajectoire confirmée" if report.success else "Trajectoire annulée",
        ]
        self.header("Relève de navigation")
        self.frame_lines("Itinéraire stellaire", lines, _BORDER_NAVIGATION)
        self._stars(28)

    def render_encounter(self, enemy_name: str, result: CombatResult) -> None:
        lines = [
            f"Cible : {enemy_name}",
            f"Tours : {result.rounds}",
            "Statut : Neutralisé" if result.victory else "Statut : Retraite",
        ]
        if result.victory:
            drop_lines = sorted(f"Butin : {name} ×{amount}" for name, amount in result.drops.items())
            lines.extend(drop_lines or ["Aucun butin relevé"])

        self.header("Rapport de combat spatial")
        self._stars(30)
        self.frame_lines("Analyse de la menace", lines, _BORDER_COMBAT)
        self._stars(30)

    def render_crafting(self, item_name: str, success: bool, actor: Actor) -> None:
        lines = [
            f"Prototype : {item_name}",
            "Fabrication réussie" if success else "Fabrication reportée",
            f"Inventaire ressources : {len(actor.inventory.resources)} entrées",
        ]
        self.header("Synthèse orbitale")
        self.frame_lines("Laboratoire astral", lines, _BORDER_LAB)

    def render_sanctuary(self, sanctuary_name: str, activated: bool) -> None:
        lines = [
            f"Balise : {sanctuary_name}",
            "État : Connectée" if activated else "État : Hors ligne",
            "Flux : Rayon quantique stabilisé" if activated else "Flux : En attente d'alignement",
        ]
        self.header("Activation du relais stellaire")
        self.frame_lines("Réseau de relais", lines, _BORDER_RELAY)
        self._stars(34)

    def render_starmap(self, actor: Actor, quest: QuestService) -> None:
        if quest.completed:
            mission = "Mission : Complétée"
        else:
            mission = f"Mission : Étape {quest.current_step_index}/{quest.quest.step_count}"
        lines = [
            f"Position : {actor.location}",
            f"Niveau : {actor.level}",
            mission,
            f"Entrées du journal : {len(actor.log)}",
        ]
        self.header("Cartographie finale")
        self.frame_lines("Synthèse cosmique", lines, _BORDER_HERO)
        self._stars(36)

    def render_inventory(self, actor: Actor) -> None:
        inventory = actor.inventory
        self.header("Inventaire Final")
        self.console.print(escape(f"Ressources : {summarize_category(inventory.resources)}"))
        self.console.print(escape(f"Objets : {summarize_category(inventory.items)}"))
        self.console.print(escape(f"Objets de quête : {summarize_category(inventory.quest_items)}"))

    def render_journal(self, actor: Actor) -> None:
        self.header("Journal du héros")
        for entry in actor.log:
            self.console.print(escape(entry))

    def render_final_stats(self, actor: Actor) -> None:
        stats = actor.stats
        self.header("Statistiques finales")
        self.console.print(
            f"Niveau : {actor.level} (XP actuelle : {actor.experience} / {actor.experience_threshold()})"
        )
        self.console.print(f"Santé : {stats.health} / {stats.max_health}")
        self.console.print(f"Mana : {stats.mana} / {stats.max_mana}")
